"""Render a binary file as a C unsigned char array definition."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Union

StrPath = Union[str, PathLike]

_VALUES_PER_BREAK = 10


def format_c_array(data: bytes | bytearray | memoryview) -> str:
    """Return C source declaring the bytes of data as an array named Arr."""
    raw = bytes(data)
    parts = [
        f"//No. Of Bytes in File = {len(raw)} //",
        "\r\n \r\n",
        "unsigned char Arr[] = {  ",
    ]
    last = len(raw) - 1
    for index, byte in enumerate(raw):
        if index == last:
            parts.append(f"0x{byte:02x} }}; ")
            break
        parts.append(f"0x{byte:02x},  ")
        if index % _VALUES_PER_BREAK == 0:
            parts.append("\r\n   ")
    return "".join(parts)


def convert_file(source: StrPath, destination: StrPath) -> int:
    """Write the C array form of source to destination; return the byte count."""
    data = Path(source).read_bytes()
    Path(destination).write_bytes(format_c_array(data).encode("ascii"))
    return len(data)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert a binary file to a C array and print its size."""
    parser = argparse.ArgumentParser(
        prog="c-array", description="Render a binary file as a C byte array."
    )
    parser.add_argument("source", nargs="?", default="mir.bin", help="binary input file")
    parser.add_argument("destination", nargs="?", default="sunny", help="C output file")
    args = parser.parse_args(argv)
    try:
        size = convert_file(args.source, args.destination)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(size)
    return 0