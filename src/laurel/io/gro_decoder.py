#!/usr/bin/env python3
# src/laurel/io/gro_decoder.py

"""
Decoder for GROMACS .gro coordinate files.

Layout of the text:
    line 1          title
    line 2          number of atoms
    n_atoms lines   fixed-width atom records
    last line       box vectors, whitespace separated

Atom record columns:
    [0, 5)    residue number
    [5, 10)   residue name
    [10, 15)  atom name
    [15, 20)  atom number
    [20, 44)  x, y, z in nm, 8 columns each
"""

import logging
import re
from typing import Iterable, Iterator, List, Optional

import numpy as np

from ..core.domain.exceptions import (
    InvalidAtomCountError,
    MalformedAtomRecordError,
    MalformedBoxVectorsError,
    TruncatedInputError,
)
from ..core.domain.models.atom import AtomRecord
from ..core.domain.models.box_vectors import BoxVectors
from ..core.domain.models.structure import Structure

logger = logging.getLogger(__name__)

TITLE_LINE = 1
COUNT_LINE = 2
FIRST_ATOM_LINE = 3

INTEGER_FIELDS = (("residue_number", 0, 5), ("atom_number", 15, 20))
NAME_FIELDS = (("residue_name", 5, 10), ("atom_name", 10, 15))
POSITION_FIELDS = (("x", 20, 28), ("y", 28, 36), ("z", 36, 44))

N_OFF_DIAGONAL = 6

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _split_lines(text: str) -> List[str]:
    """Split on newlines only, dropping a trailing carriage return per line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_unsigned(text: str) -> int:
    if not INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if value < 0:
        raise ValueError(f"negative value {value}")
    return value


def _parse_float(text: str) -> float:
    if "_" in text or not text.isascii():
        raise ValueError(f"not a decimal number: {text!r}")
    return float(text)


def parse_atom_line(
    line: str, record_index: int, line_number: Optional[int] = None
) -> AtomRecord:
    """
    Parse one fixed-width atom record.

    Args:
        line: Record text, without the line terminator
        record_index: 0-based index of the record in the atom sequence
        line_number: 1-based line number, used in error messages

    Returns:
        Parsed AtomRecord

    Raises:
        MalformedAtomRecordError: If a numeric field cannot be parsed
    """
    values = {}

    for field, start, end in INTEGER_FIELDS:
        text = line[start:end].strip()
        try:
            values[field] = _parse_unsigned(text)
        except ValueError as err:
            raise MalformedAtomRecordError(
                field, record_index, text, line_number
            ) from err

    for field, start, end in NAME_FIELDS:
        values[field] = line[start:end].strip()

    position = []
    for field, start, end in POSITION_FIELDS:
        text = line[start:end].strip()
        try:
            position.append(np.float32(_parse_float(text)))
        except ValueError as err:
            raise MalformedAtomRecordError(
                field, record_index, text, line_number
            ) from err

    return AtomRecord(position=tuple(position), **values)


def iter_atom_records(
    lines: Iterable[str], n_atoms: int, first_line_number: int = FIRST_ATOM_LINE
) -> Iterator[AtomRecord]:
    """
    Lazily produce atom records from a line iterator.

    Consumes exactly n_atoms lines. The generator is single-pass and
    cannot be restarted.

    Raises:
        TruncatedInputError: If the lines run out before n_atoms records
    """
    lines = iter(lines)
    for record_index in range(n_atoms):
        line_number = first_line_number + record_index
        try:
            line = next(lines)
        except StopIteration:
            raise TruncatedInputError(
                f"expected {n_atoms} atom records, found {record_index}",
                line_number,
            ) from None
        yield parse_atom_line(line, record_index, line_number)


def parse_box_line(line: str, line_number: Optional[int] = None) -> BoxVectors:
    """
    Parse the box vector line.

    The three diagonal terms are mandatory. The six off-diagonal terms are
    applied only when exactly six more tokens follow and all of them parse;
    otherwise they are discarded together and left at 0.0.

    Raises:
        MalformedBoxVectorsError: If the diagonal terms are missing or invalid
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise MalformedBoxVectorsError(
            f"expected at least 3 box vector terms, found {len(tokens)}", line_number
        )

    try:
        diagonal = [_parse_float(token) for token in tokens[:3]]
    except ValueError as err:
        raise MalformedBoxVectorsError(
            f"invalid diagonal box vector terms {tokens[:3]}", line_number
        ) from err

    rest = tokens[3:]
    off_diagonal = [0.0] * N_OFF_DIAGONAL
    if rest:
        try:
            if len(rest) != N_OFF_DIAGONAL:
                raise ValueError(
                    f"expected {N_OFF_DIAGONAL} off-diagonal terms, found {len(rest)}"
                )
            off_diagonal = [_parse_float(token) for token in rest]
        except ValueError as err:
            logger.warning(f"Ignoring off-diagonal box vector terms {rest}: {err}")

    return BoxVectors(*diagonal, *off_diagonal)


def decode_gro(text: str) -> Structure:
    """
    Decode the full text of a .gro file into a Structure.

    The whole text is parsed before returning; on any error nothing is
    returned and the first violation is raised.

    Args:
        text: Contents of a .gro file

    Returns:
        Structure with title, atoms and box vectors

    Raises:
        GroDecodeError: Subclass describing the first violation found
    """
    lines = _split_lines(text)

    if len(lines) < TITLE_LINE:
        raise TruncatedInputError("missing title line", TITLE_LINE)
    title = lines[TITLE_LINE - 1].strip()

    if len(lines) < COUNT_LINE:
        raise TruncatedInputError("missing atom count line", COUNT_LINE)
    count_line = lines[COUNT_LINE - 1]
    try:
        n_atoms = _parse_unsigned(count_line.strip())
    except ValueError as err:
        raise InvalidAtomCountError(
            f"invalid atom count {count_line.strip()!r}", COUNT_LINE
        ) from err

    box_line_number = FIRST_ATOM_LINE + n_atoms
    if len(lines) < box_line_number:
        n_records = max(len(lines) - COUNT_LINE, 0)
        raise TruncatedInputError(
            f"expected {n_atoms} atom records and a box line, "
            f"found {n_records} lines after the atom count",
            len(lines) + 1,
        )

    logger.debug(f"Decoding '{title}' with {n_atoms} atoms")
    record_lines = lines[FIRST_ATOM_LINE - 1 : box_line_number - 1]
    atoms: List[AtomRecord] = list(iter_atom_records(record_lines, n_atoms))
    box_vectors = parse_box_line(lines[box_line_number - 1], box_line_number)

    logger.debug(f"Decoded {len(atoms)} atoms, box {box_vectors.as_tuple()}")
    return Structure(title=title, atoms=atoms, box_vectors=box_vectors)
