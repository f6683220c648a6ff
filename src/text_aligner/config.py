from __future__ import annotations

import codecs
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import AlignMode

logger = logging.getLogger(__name__)


class InvalidConfigError(ValueError):
    """Raised when the width, alignment or file settings cannot be used."""


@dataclass(frozen=True, slots=True)
class AlignerConfig:
    """Configuration options for a formatting run."""

    max_width: int = 80
    align: AlignMode = AlignMode.LEFT
    encoding: str = "utf-8"
    trailing_newline: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "align", parse_align_mode(self.align))

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary suitable for YAML output."""
        data = dict(asdict(self))
        data["align"] = self.align.value
        return data


def parse_align_mode(value: AlignMode | str) -> AlignMode:
    """Map an alignment token such as ``"Justify"`` to its AlignMode."""
    if isinstance(value, AlignMode):
        return value
    normalized = str(value).lower().strip()
    for mode in AlignMode:
        if mode.value == normalized:
            return mode
    expected = ", ".join(f"`{mode.value}`" for mode in AlignMode)
    raise InvalidConfigError(
        f"Align option is incorrect. Expected {expected}, got: {value}"
    )


def validate_max_width(value: Any) -> int:
    """Return value when it is a usable line width."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"Line width must be an integer, got: {value!r}")
    if value <= 0:
        raise InvalidConfigError(f"Line width must be positive, got: {value}")
    return value


def validate_config(config: AlignerConfig) -> AlignerConfig:
    """Check every setting before any text is read or rendered."""
    validate_max_width(config.max_width)
    parse_align_mode(config.align)
    try:
        codecs.lookup(config.encoding)
    except (LookupError, TypeError) as exc:
        raise InvalidConfigError(f"Unknown encoding: {config.encoding!r}") from exc
    if not isinstance(config.trailing_newline, bool):
        raise InvalidConfigError(
            f"trailing_newline must be true or false, got: {config.trailing_newline!r}"
        )
    return config


def _known_settings(data: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the AlignerConfig fields of data, warning about the rest."""
    names = {field.name for field in fields(AlignerConfig)}
    unknown = sorted(str(key) for key in data if key not in names)
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
    return {key: value for key, value in data.items() if key in names}


def config_from_dict(data: Mapping[str, Any] | None) -> AlignerConfig:
    """Build a validated AlignerConfig from a dictionary-like input."""
    if not data:
        return AlignerConfig()
    return validate_config(AlignerConfig(**_known_settings(data)))


def config_from_yaml(path: str | Path) -> AlignerConfig:
    """Parse a YAML mapping of settings from path."""
    source = Path(path)
    try:
        parsed = yaml.safe_load(source.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidConfigError(f"Malformed configuration file {source}: {exc}") from exc
    if parsed is None:
        return AlignerConfig()
    if not isinstance(parsed, Mapping):
        raise InvalidConfigError(f"Configuration file {source} must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AlignerConfig:
    """Settings from path when one is given, else the defaults."""
    return AlignerConfig() if path is None else config_from_yaml(path)
