#!/usr/bin/env python3
# src/laurel/core/domain/exceptions.py

"""
Errors raised while decoding a GROMACS .gro structure.

Every decode failure derives from GroDecodeError, so callers can treat any
of them as fatal to loading a single file.
"""

from typing import Optional


class GroDecodeError(ValueError):
    """Base class for all .gro decoding failures."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class TruncatedInputError(GroDecodeError):
    """The text ended before the title, count, atom records or box line."""


class InvalidAtomCountError(GroDecodeError):
    """The atom count line is not a non-negative integer."""


class MalformedAtomRecordError(GroDecodeError):
    """A fixed-width numeric field of an atom record could not be parsed."""

    def __init__(
        self,
        field: str,
        record_index: int,
        value: str = "",
        line_number: Optional[int] = None,
    ):
        self.field = field
        self.record_index = record_index
        self.value = value
        super().__init__(
            f"malformed {field} {value!r} in atom record {record_index}",
            line_number,
        )


class MalformedBoxVectorsError(GroDecodeError):
    """The box line has fewer than three parseable diagonal terms."""


class NameOverflowError(GroDecodeError):
    """A residue or atom name is longer than its fixed capacity."""

    def __init__(
        self,
        field: str,
        value: str,
        capacity: int,
        record_index: Optional[int] = None,
        line_number: Optional[int] = None,
    ):
        self.field = field
        self.value = value
        self.capacity = capacity
        self.record_index = record_index
        where = f" in atom record {record_index}" if record_index is not None else ""
        super().__init__(
            f"{field} {value!r} exceeds {capacity} characters{where}", line_number
        )
