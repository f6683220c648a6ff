from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlignMode(str, Enum):
    """Supported alignment policies."""

    LEFT = "left"
    RIGHT = "right"
    JUSTIFY = "justify"


@dataclass(frozen=True, slots=True)
class Word:
    """A run of non-whitespace characters and its inclusive-exclusive offsets."""

    text: str
    start_char: int
    end_char: int

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Line:
    """Words assigned to a single output row."""

    words: tuple[Word, ...]
    max_width: int
    terminal: bool = False

    @property
    def content_width(self) -> int:
        """Width of the words joined by single spaces."""
        return sum(len(word) for word in self.words) + len(self.words) - 1

    @property
    def slack(self) -> int:
        """Spare columns beyond the mandatory separators, never negative."""
        return max(0, self.max_width - self.content_width)

    @property
    def overflows(self) -> bool:
        return self.content_width > self.max_width

    @property
    def text(self) -> str:
        return " ".join(word.text for word in self.words)
