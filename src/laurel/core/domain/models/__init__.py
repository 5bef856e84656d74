"""Domain model classes."""

from .atom import AtomRecord, FixedName
from .box_vectors import BoxVectors
from .structure import Structure

__all__ = [
    "AtomRecord",
    "FixedName",
    "BoxVectors",
    "Structure",
]
