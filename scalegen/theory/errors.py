from __future__ import annotations

"""Exceptions raised by the theory layer.

All of them are caller-input errors. They derive from ValueError so code
that already guards note parsing with ``except ValueError`` keeps working.
"""


class ScaleError(ValueError):
    """Base class for scale computation errors."""


class InvalidStepCodeError(ScaleError):
    def __init__(self, step: str) -> None:
        super().__init__(f"Invalid step code: {step!r} (expected one of 'm', 'M', 'A')")
        self.step = step


class TonicNotFoundError(ScaleError):
    def __init__(self, tonic: str, scale) -> None:
        super().__init__(f"Tonic {tonic!r} not found in scale {' '.join(scale)}")
        self.tonic = tonic
        self.scale = tuple(scale)


class InvalidPatternError(ScaleError):
    """A catalogue pattern is malformed or does not span one octave."""

    def __init__(self, name: str, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {name!r} ({pattern!r}): {reason}")
        self.name = name
        self.pattern = pattern


class UnknownPatternError(ScaleError):
    def __init__(self, name: str, known) -> None:
        super().__init__(f"Unknown scale pattern: {name!r}. Options: {sorted(known)}")
        self.name = name


class CatalogueError(ScaleError):
    """A pattern catalogue file cannot be parsed into name -> pattern pairs."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid pattern catalogue {path}: {reason}")
        self.path = path
