"""Text rendering of dataset entries."""

from __future__ import annotations

from .dataset import Entry


def format_entry(entry: Entry) -> str:
    """Return the label and the image as a grid of centred pixel values."""
    lines = [f"Entry label: {entry.label}", "Entry image:"]
    lines.extend("".join(f"{pixel:^4}" for pixel in row) for row in entry.image)
    return "\n".join(lines) + "\n"


def print_entry(entry: Entry) -> None:
    """Print an entry to standard output."""
    print(format_entry(entry), end="")