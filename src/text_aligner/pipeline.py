from __future__ import annotations

import logging
from typing import Iterator, List

from .alignment import render_line
from .config import AlignerConfig, parse_align_mode, validate_max_width
from .linebreaking import iter_lines
from .models import AlignMode
from .tokenization import iter_words

logger = logging.getLogger(__name__)


def iter_rendered_lines(
    text: str, max_width: int, mode: AlignMode | str
) -> Iterator[str]:
    """Lazily render text; the width and mode are checked before iteration."""
    validate_max_width(max_width)
    align_mode = parse_align_mode(mode)
    return (
        render_line(line, align_mode)
        for line in iter_lines(iter_words(text), max_width)
    )


def render(text: str, max_width: int, mode: AlignMode | str) -> List[str]:
    """Wrap text to max_width and render every line under mode."""
    lines = list(iter_rendered_lines(text, max_width, mode))
    logger.debug(
        "Rendered %d lines at width %d (%s).",
        len(lines),
        max_width,
        parse_align_mode(mode).value,
    )
    return lines


def render_text(text: str, config: AlignerConfig) -> str:
    """Render text with the given configuration and join the lines."""
    lines = render(text, config.max_width, config.align)
    if not lines:
        return ""
    rendered = "\n".join(lines)
    if config.trailing_newline:
        rendered += "\n"
    return rendered
