"""Readers for structure file formats."""

from .gro_decoder import decode_gro, iter_atom_records, parse_atom_line, parse_box_line

__all__ = [
    "decode_gro",
    "iter_atom_records",
    "parse_atom_line",
    "parse_box_line",
]
