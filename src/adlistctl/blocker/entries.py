# src/adlistctl/blocker/entries.py
"""Line model for an adlists file.

Every line of the file becomes exactly one entry, and rendering the entries
in order reproduces the original text byte-for-byte:

- ``Active``   a URL line the blocking service will fetch
- ``Disabled`` a line commented out with ``#``
- ``Other``    blank lines and bare comment markers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from .config import COMMENT_MARK, DISABLED_PREFIX


@dataclass(frozen=True)
class Active:
    text: str
    ending: str = "\n"

    def render(self) -> str:
        return f"{self.text}{self.ending}"

    def matches(self, url: str) -> bool:
        return _starts_with(self.text, url)

    def disable(self) -> "Disabled":
        return Disabled(raw=f"{DISABLED_PREFIX}{self.text}", body=self.text, ending=self.ending)


@dataclass(frozen=True)
class Disabled:
    raw: str
    body: str
    ending: str = "\n"

    def render(self) -> str:
        return f"{self.raw}{self.ending}"

    def matches(self, url: str) -> bool:
        return _starts_with(self.body, url)

    def enable(self) -> Active:
        return Active(text=self.body, ending=self.ending)


@dataclass(frozen=True)
class Other:
    raw: str
    ending: str = "\n"

    def render(self) -> str:
        return f"{self.raw}{self.ending}"


Entry = Union[Active, Disabled, Other]


def _starts_with(text: str, url: str) -> bool:
    # Literal, case-insensitive prefix match
    return text.lower().startswith(url.lower())


def split_lines(content: str) -> List[Tuple[str, str]]:
    """
    Split text into (line, ending) pairs. The final pair has an empty ending
    when the content does not end with a newline.
    """
    pieces = content.split("\n")
    tail = pieces.pop()
    lines = []
    for piece in pieces:
        if piece.endswith("\r"):
            lines.append((piece[:-1], "\r\n"))
        else:
            lines.append((piece, "\n"))
    if tail:
        lines.append((tail, ""))
    return lines


def classify(text: str, ending: str = "\n") -> Entry:
    stripped = text.strip()
    if not stripped or stripped == COMMENT_MARK:
        return Other(raw=text, ending=ending)
    if text.startswith(COMMENT_MARK):
        return Disabled(raw=text, body=text[len(COMMENT_MARK):].lstrip(), ending=ending)
    return Active(text=text, ending=ending)


def parse_entries(content: str) -> List[Entry]:
    return [classify(text, ending) for text, ending in split_lines(content)]


def render_entries(entries: List[Entry]) -> str:
    return "".join(entry.render() for entry in entries)
