#!/usr/bin/env python3
# src/laurel/core/domain/models/box_vectors.py

"""
Periodic simulation cell of a .gro structure.
"""

from dataclasses import astuple, dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class BoxVectors:
    """
    General (possibly triclinic) 3x3 cell stored as nine scalars.

    The field order follows the .gro box line: the diagonal terms first,
    then the six off-diagonal terms.
    """

    v1x: float = 0.0
    v2y: float = 0.0
    v3z: float = 0.0
    v1y: float = 0.0
    v1z: float = 0.0
    v2x: float = 0.0
    v2z: float = 0.0
    v3x: float = 0.0
    v3y: float = 0.0

    def __post_init__(self):
        for name, value in zip(self.__dataclass_fields__, astuple(self)):
            object.__setattr__(self, name, float(np.float32(value)))

    def as_tuple(self) -> Tuple[float, ...]:
        """Return the nine terms in stored order."""
        return astuple(self)

    @property
    def diagonal(self) -> Tuple[float, float, float]:
        return (self.v1x, self.v2y, self.v3z)

    @property
    def off_diagonal(self) -> Tuple[float, ...]:
        return (self.v1y, self.v1z, self.v2x, self.v2z, self.v3x, self.v3y)

    @property
    def is_triclinic(self) -> bool:
        return any(term != 0.0 for term in self.off_diagonal)

    def matrix(self) -> np.ndarray:
        """
        Return the cell as a 3x3 float32 matrix.

        Returns:
            Array whose rows are the box vectors v1, v2 and v3
        """
        return np.array(
            [
                [self.v1x, self.v1y, self.v1z],
                [self.v2x, self.v2y, self.v2z],
                [self.v3x, self.v3y, self.v3z],
            ],
            dtype=np.float32,
        )

    def volume(self) -> float:
        """Return the cell volume in nm^3."""
        return float(abs(np.linalg.det(self.matrix().astype(np.float64))))
