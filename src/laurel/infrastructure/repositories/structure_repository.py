# src/laurel/infrastructure/repositories/structure_repository.py
"""Repository implementation for .gro structures stored on disk."""

from typing import Dict, Optional
import logging
import os

from ...core.interfaces.repository import Repository
from ...core.domain.models.structure import Structure
from ...io.gro_decoder import decode_gro

logger = logging.getLogger(__name__)


class StructureRepository(Repository[Structure]):
    """Repository for reading structure files from a directory."""

    def __init__(self, data_dir: str, extension: str = ".gro", cache: bool = True):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing structure files
            extension: File extension of structure files
            cache: Whether to keep decoded structures in memory
        """
        self._data_dir = data_dir
        self._extension = extension
        self._use_cache = cache
        self._cache: Dict[str, Structure] = {}

    @property
    def data_dir(self) -> str:
        return self._data_dir

    def path_for(self, id: str) -> str:
        """Return the file path holding the structure with this ID."""
        return os.path.join(self._data_dir, f"{id}{self._extension}")

    def get(self, id: str) -> Optional[Structure]:
        """
        Retrieve a structure by ID.

        Args:
            id: Structure identifier (file name without extension)

        Returns:
            Decoded Structure, or None if no such file exists

        Raises:
            GroDecodeError: If the file is not a valid structure
        """
        if id in self._cache:
            return self._cache[id]

        file_path = self.path_for(id)
        if not os.path.isfile(file_path):
            return None

        structure = self.load_path(file_path)
        if self._use_cache:
            self._cache[id] = structure
        return structure

    def list(self) -> Dict[str, Structure]:
        """
        List all structures in the data directory.

        Returns:
            Dictionary mapping structure IDs to structures, sorted by ID
        """
        structures = {}
        for file_name in sorted(os.listdir(self._data_dir)):
            if file_name.endswith(self._extension):
                id = file_name[: -len(self._extension)]
                if (structure := self.get(id)) is not None:
                    structures[id] = structure
        return structures

    @staticmethod
    def load_path(file_path: str) -> Structure:
        """Read and decode a single structure file."""
        logger.info(f"Loading structure from {file_path}")
        with open(file_path, "r", newline="") as f:
            text = f.read()
        return decode_gro(text)
