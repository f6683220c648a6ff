from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Sequence

from .config import validate_max_width
from .models import Line, Word

logger = logging.getLogger(__name__)


def iter_lines(words: Iterable[Word], max_width: int) -> Iterator[Line]:
    """Greedily pack words into lines no wider than max_width.

    A word that does not fit next to the words already collected starts a new
    line, so every line except the last one is closed because another word
    follows it. The last line is flagged as terminal. A word longer than
    max_width is never split and ends up alone on its own line.

    The width is checked when this is called, not when iteration starts.
    """
    validate_max_width(max_width)
    return _pack_lines(words, max_width)


def build_lines(words: Iterable[Word], max_width: int) -> List[Line]:
    """Eager counterpart of iter_lines."""
    return list(iter_lines(words, max_width))


def _pack_lines(words: Iterable[Word], max_width: int) -> Iterator[Line]:
    pending: List[Word] = []
    width = 0

    for word in words:
        if pending and width + 1 + len(word) > max_width:
            yield _close_line(pending, max_width, terminal=False)
            pending = []
            width = 0
        width = len(word) if not pending else width + 1 + len(word)
        pending.append(word)

    if pending:
        yield _close_line(pending, max_width, terminal=True)


def _close_line(words: Sequence[Word], max_width: int, terminal: bool) -> Line:
    line = Line(words=tuple(words), max_width=max_width, terminal=terminal)
    if line.overflows:
        word = line.words[0]
        logger.debug(
            "Word at characters %d-%d is %d wide (max %d); placing it alone.",
            word.start_char,
            word.end_char,
            len(word),
            max_width,
        )
    return line
