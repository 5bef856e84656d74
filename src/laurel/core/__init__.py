"""Core domain models, interfaces and services for .gro structures."""

from .domain.models.atom import AtomRecord, FixedName
from .domain.models.box_vectors import BoxVectors
from .domain.models.structure import Structure
from .services.structure_service import StructureService, StructureSummary

__all__ = [
    "AtomRecord",
    "FixedName",
    "BoxVectors",
    "Structure",
    "StructureService",
    "StructureSummary",
]
