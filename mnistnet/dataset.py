"""Reading of MNIST image and label files in the IDX format."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO

IMAGE_SIDE = 28
IMAGE_MAGIC = 2051
LABEL_MAGIC = 2049

_INT32 = struct.Struct(">i")


@dataclass(frozen=True)
class Entry:
    """One labelled 28x28 greyscale image."""

    image: tuple[bytes, ...]
    label: int

    def __post_init__(self) -> None:
        if len(self.image) != IMAGE_SIDE or any(
            len(row) != IMAGE_SIDE for row in self.image
        ):
            raise ValueError(
                f"expected an image of {IMAGE_SIDE}x{IMAGE_SIDE} pixels"
            )

    def pixels(self) -> bytes:
        """Return the image row by row as one flat sequence of pixel values."""
        return b"".join(self.image)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError("unexpected end of file")
    return data


def _read_int32(stream: BinaryIO) -> int:
    return _INT32.unpack(_read_exact(stream, _INT32.size))[0]


def read_file(
    data_filename: str | os.PathLike[str], label_filename: str | os.PathLike[str]
) -> list[Entry]:
    """Read paired IDX image and label files into a list of entries.

    Raises ValueError when a magic number is wrong and EOFError when a file
    ends before the entries it announces.
    """
    with open(data_filename, "rb") as data_file, open(label_filename, "rb") as label_file:
        if _read_int32(data_file) != IMAGE_MAGIC:
            raise ValueError(
                f"expected the magic number of image header info to be {IMAGE_MAGIC}"
            )
        if _read_int32(label_file) != LABEL_MAGIC:
            raise ValueError(
                f"expected the magic number of label header info to be {LABEL_MAGIC}"
            )

        size = _read_int32(data_file)
        _read_int32(label_file)

        # Row and column counts are always 28 and are not used.
        _read_int32(data_file)
        _read_int32(data_file)

        entries: list[Entry] = []
        for _ in range(size):
            label = _read_exact(label_file, 1)[0]
            flat = _read_exact(data_file, IMAGE_SIDE * IMAGE_SIDE)
            rows = tuple(
                flat[start : start + IMAGE_SIDE]
                for start in range(0, len(flat), IMAGE_SIDE)
            )
            entries.append(Entry(image=rows, label=label))
        return entries