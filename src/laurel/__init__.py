"""Reading GROMACS .gro structures and querying their geometry."""

from .core.domain.exceptions import (
    GroDecodeError,
    InvalidAtomCountError,
    MalformedAtomRecordError,
    MalformedBoxVectorsError,
    NameOverflowError,
    TruncatedInputError,
)
from .core.domain.models import AtomRecord, BoxVectors, FixedName, Structure
from .io.gro_decoder import decode_gro, iter_atom_records, parse_atom_line

__version__ = "0.1.0"

__all__ = [
    "AtomRecord",
    "BoxVectors",
    "FixedName",
    "Structure",
    "decode_gro",
    "iter_atom_records",
    "parse_atom_line",
    "GroDecodeError",
    "TruncatedInputError",
    "InvalidAtomCountError",
    "MalformedAtomRecordError",
    "MalformedBoxVectorsError",
    "NameOverflowError",
]
