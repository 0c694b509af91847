"""scalegen package initialization.

Re-exports the theory API so callers can simply ``import scalegen``.
"""

from __future__ import annotations

from .theory import (
    FLAT,
    SHARP,
    CatalogueError,
    InvalidPatternError,
    InvalidStepCodeError,
    ScaleError,
    TonicNotFoundError,
    UnknownPatternError,
    chromatic_scale,
    find_chromatic_scale,
    flat_chromatic_scale,
    list_patterns,
    named_scale,
    normalize_tonic,
    pattern_for,
    scale,
    select_spelling,
    step,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FLAT",
    "SHARP",
    "CatalogueError",
    "InvalidPatternError",
    "InvalidStepCodeError",
    "ScaleError",
    "TonicNotFoundError",
    "UnknownPatternError",
    "chromatic_scale",
    "find_chromatic_scale",
    "flat_chromatic_scale",
    "list_patterns",
    "named_scale",
    "normalize_tonic",
    "pattern_for",
    "scale",
    "select_spelling",
    "step",
]
