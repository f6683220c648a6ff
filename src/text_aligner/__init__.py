"""
text_aligner package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .alignment import render_line
from .config import (
    AlignerConfig,
    InvalidConfigError,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .models import AlignMode, Line, Word
from .pipeline import iter_rendered_lines, render, render_text

__all__ = [
    "AlignMode",
    "AlignerConfig",
    "InvalidConfigError",
    "Line",
    "Word",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "iter_rendered_lines",
    "render",
    "render_line",
    "render_text",
]

__version__ = "0.1.0"
