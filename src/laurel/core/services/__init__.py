"""Services implementing structure use cases."""

from .structure_service import StructureService, StructureSummary

__all__ = [
    "StructureService",
    "StructureSummary",
]
