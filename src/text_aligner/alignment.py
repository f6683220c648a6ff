from __future__ import annotations

from typing import Callable, Dict

from .config import parse_align_mode
from .models import AlignMode, Line


def align_left(line: Line) -> str:
    """Join words with single spaces and pad the right edge."""
    return line.text + " " * line.slack


def align_right(line: Line) -> str:
    """Pad the left edge, then join words with single spaces."""
    return " " * line.slack + line.text


def justify(line: Line) -> str:
    """Stretch interior gaps so the line fills its full width.

    Terminal and single-word lines have nothing worth stretching and are
    rendered left-aligned. Otherwise every gap receives the same share of the
    slack and the leftmost ``slack % gaps`` gaps take one extra space each.
    """
    if line.terminal or len(line.words) == 1:
        return align_left(line)

    gaps = len(line.words) - 1
    base, extra = divmod(line.slack, gaps)
    parts = [line.words[0].text]
    for index, word in enumerate(line.words[1:]):
        spaces = 1 + base + (1 if index < extra else 0)
        parts.append(" " * spaces)
        parts.append(word.text)
    return "".join(parts)


ALIGNERS: Dict[AlignMode, Callable[[Line], str]] = {
    AlignMode.LEFT: align_left,
    AlignMode.RIGHT: align_right,
    AlignMode.JUSTIFY: justify,
}


def render_line(line: Line, mode: AlignMode | str) -> str:
    """Render a line under the requested alignment mode."""
    return ALIGNERS[parse_align_mode(mode)](line)
