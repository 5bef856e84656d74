# tests/test_structure.py

"""Tests for geometric queries on structures."""

import numpy as np
import pytest

from laurel.core.domain.models.atom import AtomRecord
from laurel.core.domain.models.structure import Structure
from laurel.io.gro_decoder import decode_gro


def structure_from_positions(positions):
    atoms = [
        AtomRecord(i // 3 + 1, "SOL", "OW", i + 1, position)
        for i, position in enumerate(positions)
    ]
    return Structure(title="test", atoms=atoms)


def test_empty_structure_queries():
    structure = Structure(title="empty")

    assert structure.atom_count() == 0
    assert len(structure) == 0
    np.testing.assert_array_equal(structure.center(), np.zeros(3))
    assert structure.min_z() == 0.0
    assert structure.max_z() == 0.0
    assert structure.positions().shape == (0, 3)


def test_center_structure_on_empty_structure():
    structure = Structure(title="empty")
    structure.center_structure()
    assert structure.atoms == []


def test_center_is_unweighted_average():
    structure = structure_from_positions([(0, 0, 0), (2, 4, 6), (4, 2, 0)])
    np.testing.assert_allclose(structure.center(), [2.0, 2.0, 2.0])
    assert structure.center().dtype == np.float32


def test_min_and_max_z():
    structure = structure_from_positions([(0, 0, 1.5), (0, 0, -2.0), (0, 0, 0.25)])
    assert structure.min_z() == -2.0
    assert structure.max_z() == 1.5
    assert structure.z_extent() == (-2.0, 1.5)


def test_single_atom_extent():
    structure = structure_from_positions([(1, 2, 3)])
    assert structure.min_z() == structure.max_z() == 3.0


def test_center_structure_moves_center_to_origin(water_text):
    structure = decode_gro(water_text)
    structure.center_structure()

    assert np.linalg.norm(structure.center()) == pytest.approx(0.0, abs=1e-6)


def test_center_structure_preserves_relative_positions(water_text):
    structure = decode_gro(water_text)
    before = structure.positions()
    center = structure.center()

    structure.center_structure()

    np.testing.assert_allclose(structure.positions(), before - center, atol=1e-6)


def test_center_structure_keeps_identifiers_and_order(water_text):
    structure = decode_gro(water_text)
    atoms = structure.atoms
    names = [(a.residue_number, a.atom_name, a.atom_number) for a in atoms]

    structure.center_structure()

    assert structure.atoms is atoms
    assert structure.atom_count() == 6
    assert [(a.residue_number, a.atom_name, a.atom_number) for a in atoms] == names


def test_center_structure_twice_is_negligible(water_text):
    structure = decode_gro(water_text)
    structure.center_structure()
    once = structure.positions()

    structure.center_structure()

    np.testing.assert_allclose(structure.positions(), once, atol=1e-6)


def test_depth_normalized_between_extent():
    structure = structure_from_positions([(0, 0, -1.0), (0, 0, 0.0), (0, 0, 1.0)])
    depths = [structure.depth(atom) for atom in structure]
    assert depths == pytest.approx([0.0, 0.5, 1.0])


def test_depth_of_flat_structure():
    structure = structure_from_positions([(0, 0, 2.0), (1, 1, 2.0)])
    assert [structure.depth(atom) for atom in structure] == [0.0, 0.0]


def test_positions_array(water_text):
    positions = decode_gro(water_text).positions()
    assert positions.shape == (6, 3)
    assert positions.dtype == np.float32
    np.testing.assert_allclose(positions[0], [0.126, 1.624, 1.679], rtol=1e-6)
