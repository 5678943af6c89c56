"""Spectral upsampling of RGB colours and images, with spectrum, ENVI header and colour math utilities."""

__version__ = "0.1.0"