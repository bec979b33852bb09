"""Reading and writing the C array declarations used for layer weights."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Iterable, Union

Number = Union[int, float]

_FLOAT_TYPES = frozenset({"float", "double"})

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"//[^\n]*")
_ARRAY = re.compile(
    r"(?P<ctype>\w+)\s+(?P<name>[A-Za-z_]\w*)\s*\[[^\]]*\]\s*=\s*"
    r"\{(?P<body>[^{}]*)\}\s*;"
)


class HeaderParseError(ValueError):
    """Raised when a header does not hold the expected array declarations."""


def _parse_value(token: str, is_float: bool, name: str) -> Number:
    try:
        if is_float:
            return float(token.rstrip("fF"))
        return int(token, 10)
    except ValueError:
        raise HeaderParseError(
            f"bad value {token!r} in array {name!r}"
        ) from None


def _parse_body(body: str, is_float: bool, name: str) -> list[Number]:
    tokens = [token.strip() for token in body.split(",")]
    if tokens and tokens[-1] == "":
        tokens.pop()
    if not tokens:
        raise HeaderParseError(f"array {name!r} is empty")
    if any(token == "" for token in tokens):
        raise HeaderParseError(f"empty element in array {name!r}")
    return [_parse_value(token, is_float, name) for token in tokens]


def parse_arrays(text: str) -> dict[str, list[Number]]:
    """Return every initialised array in ``text``, by name, in declaration order.

    Arrays of ``float`` or ``double`` give floats; all other element types give ints.
    """
    cleaned = _LINE_COMMENT.sub("", _BLOCK_COMMENT.sub(" ", text))
    arrays: dict[str, list[Number]] = {}
    for match in _ARRAY.finditer(cleaned):
        name = match["name"]
        if name in arrays:
            raise HeaderParseError(f"array {name!r} is declared twice")
        is_float = match["ctype"] in _FLOAT_TYPES
        arrays[name] = _parse_body(match["body"], is_float, name)
    return arrays


def read_arrays(path: Union[str, PathLike]) -> dict[str, list[Number]]:
    """Read a header file and return its arrays as :func:`parse_arrays` does."""
    return parse_arrays(Path(path).read_text())


def _format_value(value: Number, is_float: bool) -> str:
    if is_float:
        return f"{float(value):.6f}"
    return str(int(value))


def format_array(
    ctype: str, name: str, values: Iterable[Number], suffix: str = "\n"
) -> str:
    """Render ``ctype name[]={...};`` with one element per line, then ``suffix``.

    Float types are written with six decimals, all others as integers.
    """
    is_float = ctype in _FLOAT_TYPES
    items = [_format_value(value, is_float) for value in values]
    if not items:
        raise ValueError(f"array {name!r} has no elements")
    return f"{ctype} {name}[]={{" + ",\n".join(items) + "};" + suffix