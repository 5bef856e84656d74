#!/usr/bin/env python3
# src/laurel/core/domain/models/atom.py

"""
Domain model representing a single atom record of a .gro structure.
"""

from dataclasses import dataclass, replace
from typing import Sequence, Tuple

import numpy as np

from ..exceptions import NameOverflowError

Position = Tuple[float, float, float]


class FixedName(str):
    """Residue or atom name with a fixed capacity of five characters."""

    capacity = 5

    def __new__(cls, value: str = "", field: str = "name"):
        value = str(value)
        if len(value) > cls.capacity:
            raise NameOverflowError(field, value, cls.capacity)
        return super().__new__(cls, value)


def as_position(values: Sequence[float]) -> Position:
    """Round three components to single precision and return them as a tuple."""
    x, y, z = np.asarray(values, dtype=np.float32).reshape(3)
    return (float(x), float(y), float(z))


@dataclass(frozen=True)
class AtomRecord:
    """One particle of a structure: its identifiers and position (nm)."""

    residue_number: int
    residue_name: FixedName
    atom_name: FixedName
    atom_number: int
    position: Position

    def __post_init__(self):
        """Validate identifiers and normalize names and position."""
        for field_name in ("residue_number", "atom_number"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{field_name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")
            object.__setattr__(self, field_name, int(value))

        object.__setattr__(
            self, "residue_name", FixedName(self.residue_name, "residue_name")
        )
        object.__setattr__(self, "atom_name", FixedName(self.atom_name, "atom_name"))
        object.__setattr__(self, "position", as_position(self.position))

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def z(self) -> float:
        return self.position[2]

    def position_array(self) -> np.ndarray:
        """Return the position as a float32 vector of shape (3,)."""
        return np.array(self.position, dtype=np.float32)

    def with_position(self, position: Sequence[float]) -> "AtomRecord":
        """Return a copy of this record placed at a new position."""
        return replace(self, position=as_position(position))
