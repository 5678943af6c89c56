import pytest

from specup.cli import Args, ArgsError, parse_args
from specup.image import Pixel
from specup.mathutil import Vec3


def test_hex_color_with_method():
    args = parse_args(["-c", "ff0000", "-m", "smits"])
    assert args.color == Pixel(255, 0, 0)
    assert args.method == "smits"
    assert args.output_name == ""
    assert args.output_dir == "output"


def test_hex_color_with_prefix():
    args = parse_args(["-c", "0x00ff00", "-m", "glassner"])
    assert args.color == Pixel(0, 255, 0)


def test_invalid_hex_color():
    with pytest.raises(ArgsError):
        parse_args(["-c", "zz", "-m", "smits"])


def test_color_vector():
    args = parse_args(["-v", "1 0.5 0", "-m", "smits"])
    assert args.color == Pixel.from_vec3(Vec3(1.0, 0.5, 0.0))


def test_invalid_color_vector():
    with pytest.raises(ArgsError):
        parse_args(["-v", "1 x 0", "-m", "smits"])


def test_file_input_names_output_after_stem():
    args = parse_args(["-f", "textures/brick.png", "-m", "smits"])
    assert args.input_path == "textures/brick.png"
    assert args.output_name == "brick"
    assert args.color is None


def test_explicit_name_and_directory():
    args = parse_args(["-f", "a.png", "-m", "smits", "-n", "result", "-D", "out"])
    assert args.output_name == "result"
    assert args.output_dir == "out"


def test_last_method_wins():
    args = parse_args(["-f", "a.png", "-m", "smits", "-m", "sigpoly"])
    assert args.method == "sigpoly"


def test_options_after_positional_are_read():
    args = parse_args(["extra", "-f", "a.png", "-m", "smits"])
    assert args.method == "smits"


def test_no_input():
    with pytest.raises(ArgsError, match="No input"):
        parse_args(["-m", "smits"])


def test_two_inputs():
    with pytest.raises(ArgsError):
        parse_args(["-c", "ffffff", "-f", "a.png", "-m", "smits"])


def test_unknown_option():
    with pytest.raises(ArgsError, match="Unknown"):
        parse_args(["-x", "-f", "a.png"])


def test_missing_method():
    with pytest.raises(ArgsError, match="No method"):
        parse_args(["-f", "a.png"])


def test_downsample_file():
    args = parse_args(["--downsample", "-f", "scene.hdr"])
    assert args.downsample_mode is True
    assert args.output_name == "scene"
    assert args.method is None


def test_downsample_rejects_method():
    with pytest.raises(ArgsError):
        parse_args(["--downsample", "-f", "scene.hdr", "-m", "smits"])


def test_downsample_rejects_color():
    with pytest.raises(ArgsError):
        parse_args(["--downsample", "-c", "ffffff"])


def test_ior_with_color():
    args = parse_args(["--ior", "-c", "808080", "-m", "smits", "-n", "metal"])
    assert args.ior_mode is True
    assert args.output_name == "metal"


def test_ior_rejects_file():
    with pytest.raises(ArgsError, match="IOR"):
        parse_args(["--ior", "-f", "a.png", "-m", "smits"])


def test_args_defaults():
    args = Args()
    assert (args.output_dir, args.input_path, args.downsample_mode, args.ior_mode) == ("output", "", False, False)