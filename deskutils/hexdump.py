"""Classic offset / hex / ASCII dump of binary data, split into styled segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Union

log = logging.getLogger(__name__)

MAX_DUMP_SIZE = 1024 * 1024
BYTES_PER_LINE = 16


class Style(Enum):
    """Role of a piece of dump text, which decides its colour."""

    OFFSET = "offset"
    HEX = "hex"
    ASCII = "ascii"
    PLAIN = "plain"

    @property
    def color(self) -> str | None:
        """Foreground colour for this style, or None for the default colour."""
        return _COLORS.get(self)


_COLORS = {
    Style.OFFSET: "#FFA500",
    Style.HEX: "#00FFFF",
    Style.ASCII: "#7CFC00",
}


@dataclass(frozen=True)
class Segment:
    """A run of dump text drawn in one style."""

    text: str
    style: Style = Style.PLAIN


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte <= 126 else "."


def hexdump_segments(data: bytes) -> Iterator[Segment]:
    """Yield the styled segments of a hex dump of *data*, one line per 16 bytes."""
    data = bytes(data)
    for offset in range(0, len(data), BYTES_PER_LINE):
        row = data[offset:offset + BYTES_PER_LINE]
        missing = BYTES_PER_LINE - len(row)

        yield Segment(f"{offset:08X}  ", Style.OFFSET)
        for byte in row:
            yield Segment(f"{byte:02X} ", Style.HEX)
        if missing:
            yield Segment("   " * missing)

        yield Segment("  ")
        for byte in row:
            yield Segment(_printable(byte), Style.ASCII)
        if missing:
            yield Segment(" " * missing)

        yield Segment("\n")


def format_hexdump(data: bytes) -> str:
    """Return the hex dump of *data* as plain text."""
    return "".join(segment.text for segment in hexdump_segments(data))


def read_dump_source(path: Union[str, Path]) -> bytes:
    """Read a file for dumping, keeping at most its first megabyte."""
    with open(path, "rb") as handle:
        data = handle.read(MAX_DUMP_SIZE + 1)
    if len(data) > MAX_DUMP_SIZE:
        log.warning("File too large, truncating to 1MB: %s", path)
        data = data[:MAX_DUMP_SIZE]
    return data