"""Reader for ENVI hyperspectral header files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

_WS = " \t\n\r\f\v"

_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\r\f\v]*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ByteOrder(Enum):
    LITTLE_ENDIAN = 0
    BIG_ENDIAN = 1


class DataType(Enum):
    FLOAT32 = 4
    FLOAT64 = 5
    UNSUPPORTED = -1


class Interleave(Enum):
    BSQ = "bsq"
    BIL = "bil"
    BIP = "bip"


class UnitType(Enum):
    NANOMETER = "nm"
    UNSUPPORTED = "unsupported"


def parse_value(text: str, kind: type = int) -> Union[int, float, str]:
    """Parse the leading number of ``text`` as ``kind``; trailing text is ignored."""
    if kind is str:
        return text
    if kind is int:
        match = _INT_RE.match(text)
        if match is None:
            raise ValueError(f"invalid integer: {text!r}")
        return int(match.group(1))
    if kind is float:
        match = _FLOAT_RE.match(text)
        if match is None:
            raise ValueError(f"invalid number: {text!r}")
        return float(match.group(1))
    raise TypeError(f"unsupported value kind: {kind!r}")


def parse_header_entries(text: str) -> dict[str, str]:
    """Split header text into ``name = value`` entries; braces span lines."""
    first, _, rest = text.partition("\n")
    if first.strip(_WS) != "ENVI":
        raise ValueError("No ENVI string")

    entries: dict[str, str] = {}
    pos = 0
    end = len(rest)
    while pos < end:
        while pos < end and rest[pos] in _WS:
            pos += 1
        name_chars: list[str] = []
        name = ""
        content: list[str] = []
        is_block = False
        level = 0
        found_eq = False
        closed = False
        while pos < end:
            c = rest[pos]
            pos += 1
            if not found_eq:
                if c == "=":
                    found_eq = True
                    name = "".join(name_chars).strip(_WS)
                    if not name:
                        raise ValueError("No variable specifier")
                else:
                    name_chars.append(c)
                continue
            if c == "{":
                level += 1
                if level != 1:
                    content.append(c)
                is_block = True
            elif c == "}":
                if level == 0:
                    raise ValueError("Unbalanced braces")
                if level != 1:
                    content.append(c)
                level -= 1
                if level == 0:
                    closed = True
                    break
            elif c == "\n" and not is_block:
                closed = True
                break
            else:
                content.append(c)

        if not closed:
            if name_chars:
                raise ValueError("Incorrect format")
            continue
        value = "".join(content).strip(_WS)
        if is_block:
            if level != 0:
                raise ValueError("Unclosed braces")
            value = value[:-1]
        entries.setdefault(name, value)
    return entries


def _parse_array(text: str, delim: str, kind: type) -> list:
    compact = "".join(ch for ch in text if ch not in _WS)
    return [parse_value(word, kind) for word in compact.split(delim)]


@dataclass
class MetaENVI:
    """Fields of an ENVI header; unrecognised entries are kept in ``additional``."""

    header_offset: int = 0
    wavelength_units: UnitType = UnitType.NANOMETER
    samples: int = 0
    lines: int = 0
    bands: int = 0
    byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN
    data_type: DataType = DataType.FLOAT32
    interleave: Interleave = Interleave.BSQ
    wavelength: list[float] = field(default_factory=list)
    illuminant: list[int] = field(default_factory=list)
    additional: dict[str, str] = field(default_factory=dict)

    @staticmethod
    def load(path: Union[str, Path]) -> MetaENVI:
        """Read and parse the header file at ``path``."""
        return MetaENVI.parse(Path(path).read_text())

    @staticmethod
    def parse(text: str) -> MetaENVI:
        """Parse header text."""
        entries = parse_header_entries(text)
        meta = MetaENVI()

        if "header offset" in entries:
            meta.header_offset = parse_value(entries.pop("header offset"), int)
        if "wavelenghts units" in entries:
            units = entries.pop("wavelenghts units")
            meta.wavelength_units = (
                UnitType.NANOMETER if units in ("nm", "Nanometers") else UnitType.UNSUPPORTED
            )
        if "samples" in entries:
            meta.samples = parse_value(entries.pop("samples"), int)
        if "lines" in entries:
            meta.lines = parse_value(entries.pop("lines"), int)
        if "bands" in entries:
            meta.bands = parse_value(entries.pop("bands"), int)
        if "byte order" in entries:
            meta.byte_order = (
                ByteOrder.LITTLE_ENDIAN
                if parse_value(entries.pop("byte order"), int) == 0
                else ByteOrder.BIG_ENDIAN
            )
        if "data type" in entries:
            code = parse_value(entries.pop("data type"), int)
            meta.data_type = {4: DataType.FLOAT32, 5: DataType.FLOAT64}.get(code, DataType.UNSUPPORTED)
        if "interleave" in entries:
            lower = entries.pop("interleave").lower()
            try:
                meta.interleave = Interleave(lower)
            except ValueError:
                raise ValueError("Unknown interleave type") from None

        if "wavelength" not in entries:
            raise ValueError("No wavelength field found")
        if meta.data_type not in (DataType.FLOAT32, DataType.FLOAT64):
            raise ValueError("Unsupported format")
        meta.wavelength = _parse_array(entries.pop("wavelength"), ",", float)

        if "Illuminant" not in entries:
            raise ValueError("No Illuminant field found")
        meta.illuminant = _parse_array(entries.pop("Illuminant"), ";", int)

        meta.additional = entries
        return meta