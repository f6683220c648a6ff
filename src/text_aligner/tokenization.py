from __future__ import annotations

import re
from typing import Iterator, List

from .models import Word

WORD_PATTERN = re.compile(r"\S+")


def iter_words(text: str) -> Iterator[Word]:
    """Yield whitespace-separated words with character offsets."""
    for match in WORD_PATTERN.finditer(text):
        yield Word(text=match.group(), start_char=match.start(), end_char=match.end())


def tokenize_words(text: str) -> List[Word]:
    """Tokenize text into a list of words."""
    return list(iter_words(text))
