"""Service for loading structures and summarizing their geometry."""

from dataclasses import dataclass
import copy
import logging
from typing import Tuple

from ..domain.models.structure import Structure
from ..interfaces.repository import Repository

logger = logging.getLogger(__name__)


@dataclass
class StructureSummary:
    """Overview of a loaded structure."""

    title: str
    atom_count: int
    center: Tuple[float, float, float]
    min_z: float
    max_z: float
    box_vectors: Tuple[float, ...]

    def lines(self):
        """Return the summary as printable lines."""
        center = "[{:.3f}, {:.3f}, {:.3f}]".format(*self.center)
        box = "[" + ", ".join(f"{term:.5f}" for term in self.box_vectors) + "]"
        return [
            f"Structure loaded: '{self.title}'",
            f"         n_atoms: {self.atom_count}",
            f"          center: {center}",
            f"             box: {box}",
        ]


class StructureService:
    """Use cases for structures held by a repository."""

    def __init__(self, repository: Repository[Structure]):
        """Initialize service with repository dependency."""
        self._repository = repository

    def get_by_id(self, id: str) -> Structure:
        """
        Retrieve a structure by ID.

        Raises:
            ValueError: If the repository has no such structure
        """
        structure = self._repository.get(id)
        if structure is None:
            raise ValueError(f"Structure with id {id} not found")
        return structure

    def load(self, id: str, center: bool = False) -> Structure:
        """
        Load a structure, optionally centered on the origin.

        Args:
            id: Structure identifier
            center: Whether to translate the structure to its center

        Returns:
            Structure; a centered one is a copy, never the repository's own

        Raises:
            ValueError: If the structure does not exist
        """
        structure = self.get_by_id(id)
        if center:
            structure = self.centered(structure)
        return structure

    @staticmethod
    def centered(structure: Structure) -> Structure:
        """Return a centered copy of a structure."""
        result = copy.copy(structure)
        result.atoms = list(structure.atoms)
        result.center_structure()
        logger.info(f"Centered '{result.title}' at {result.center().tolist()}")
        return result

    @staticmethod
    def summarize(structure: Structure) -> StructureSummary:
        """Collect the geometric overview of a structure."""
        center = structure.center()
        return StructureSummary(
            title=structure.title,
            atom_count=structure.atom_count(),
            center=tuple(float(v) for v in center),
            min_z=structure.min_z(),
            max_z=structure.max_z(),
            box_vectors=structure.box_vectors.as_tuple(),
        )
