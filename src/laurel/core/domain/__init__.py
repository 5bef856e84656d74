"""Core domain models and errors."""

from .models.atom import AtomRecord, FixedName
from .models.box_vectors import BoxVectors
from .models.structure import Structure
from .exceptions import GroDecodeError

__all__ = [
    "AtomRecord",
    "FixedName",
    "BoxVectors",
    "Structure",
    "GroDecodeError",
]
