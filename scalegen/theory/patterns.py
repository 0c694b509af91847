from __future__ import annotations

"""Named scale pattern catalogue.

Loads YAML mappings of scale name -> step pattern string (e.g.
``major: MMmMMMm``) and resolves user-facing names and aliases.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping

import yaml

from .chromatic import scale, semitones
from .errors import CatalogueError, InvalidPatternError, InvalidStepCodeError, UnknownPatternError

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS_PATH = Path(__file__).resolve().parents[1] / "resources" / "patterns.yml"

_ALIASES = {
    "maj": "major",
    "ionian": "major",
    "min": "natural_minor",
    "minor": "natural_minor",
    "aeolian": "natural_minor",
    "harmonic": "harmonic_minor",
    "melodic": "melodic_minor",
    "pentatonic": "major_pentatonic",
}


def _validate(name: str, pattern: str) -> None:
    try:
        span = sum(semitones(code) for code in pattern)
    except InvalidStepCodeError as e:
        raise InvalidPatternError(name, pattern, f"bad step code {e.step!r}") from e
    if span != 12:
        raise InvalidPatternError(name, pattern, f"spans {span} semitones, expected 12")


@lru_cache(maxsize=None)
def load_patterns(path: str | None = None) -> Mapping[str, str]:
    """Load and validate the pattern catalogue.

    Args:
        path: Optional YAML file. If None, the packaged catalogue is used.

    Returns:
        Read-only mapping of scale name to step pattern string.
    """
    if path is None:
        path = str(DEFAULT_PATTERNS_PATH)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogueError(path, f"could not parse YAML: {e}") from e
    if not isinstance(data, dict):
        raise CatalogueError(path, f"expected a mapping of name -> pattern, got {type(data).__name__}")
    # drop version key if present
    data.pop("version", None)
    patterns = {str(k): str(v) for k, v in data.items()}
    for name, pattern in patterns.items():
        _validate(name, pattern)
    logger.debug("Loaded %d scale patterns from %s", len(patterns), path)
    return MappingProxyType(patterns)


def list_patterns(path: str | None = None) -> List[str]:
    return sorted(load_patterns(path))


def _normalize_name(name: str) -> str:
    t = name.strip().lower().replace("-", "_").replace(" ", "_")
    return _ALIASES.get(t, t)


def pattern_for(name: str, path: str | None = None) -> str:
    """Return the step pattern for a scale name such as "major" or "Dorian"."""
    patterns = load_patterns(path)
    key = _normalize_name(name)
    if key not in patterns:
        raise UnknownPatternError(name, patterns)
    return patterns[key]


def named_scale(tonic: str, name: str, path: str | None = None) -> List[str]:
    return scale(tonic, pattern_for(name, path))
