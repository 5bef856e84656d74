"""Infrastructure implementations of core interfaces."""

from .repositories.structure_repository import StructureRepository

__all__ = [
    "StructureRepository",
]
