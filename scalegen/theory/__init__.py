"""Theory layer: chromatic tables, step lookup and scale generation."""

from .chromatic import (  # noqa: F401
    FLAT,
    SHARP,
    chromatic_scale,
    find_chromatic_scale,
    flat_chromatic_scale,
    normalize_tonic,
    scale,
    select_spelling,
    step,
)
from .errors import (  # noqa: F401
    CatalogueError,
    InvalidPatternError,
    InvalidStepCodeError,
    ScaleError,
    TonicNotFoundError,
    UnknownPatternError,
)
from .patterns import list_patterns, named_scale, pattern_for  # noqa: F401
