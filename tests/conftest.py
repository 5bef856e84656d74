"""Shared fixtures for structure tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "test_data" / "input"

ATOM_FORMAT = "{:5d}{:<5s}{:>5s}{:5d}{:8.3f}{:8.3f}{:8.3f}"


def atom_line(resnum, resname, atomname, atomnum, x, y, z):
    """Format one fixed-width .gro atom record."""
    return ATOM_FORMAT.format(resnum, resname, atomname, atomnum, x, y, z)


def gro_text(title, atoms, box="   3.00000   3.00000   3.00000", n_atoms=None):
    """Assemble the text of a .gro file from atom tuples."""
    lines = [title, str(len(atoms) if n_atoms is None else n_atoms)]
    lines.extend(atom_line(*atom) for atom in atoms)
    if box is not None:
        lines.append(box)
    return "\n".join(lines) + "\n"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def water_text():
    return (DATA_DIR / "water.gro").read_text()


@pytest.fixture
def single_water_text():
    return gro_text("Single water", [(1, "WAT", "OW", 1, 1.0, 2.0, 3.0)])
