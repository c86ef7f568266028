"""Tests for ring priorities and ring sequencing for double bond placement."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_ringsketch_to_sys_path()

# local repo modules
import molecule_skeletons
from ringsketch import ring_priority


#============================================
@pytest.mark.parametrize(
	"size, expected",
	[(6, 1), (5, 2), (7, 3), (4, 4), (3, 5), (8, 0), (12, 0)],
)
def test_ring_priority_by_size(size, expected):
	assert ring_priority.ring_priority(size) == expected


#============================================
def test_six_ring_outranks_five_and_seven():
	mol = molecule_skeletons.cycle(6)
	molecule_skeletons.cycle(5, center=(40.0, 0.0), mol=mol)
	molecule_skeletons.cycle(7, center=(80.0, 0.0), mol=mol)
	by_size = {ring.size: ring for ring in mol.rings}
	assert by_size[6].priority < by_size[5].priority < by_size[7].priority
	assert [ring.size for ring in ring_priority.prioritized_rings(mol.rings)] == [6, 5, 7]
	# unshared rings are then ordered by their summed atom counts
	assert [ring.size for ring in mol.sorted_rings] == [5, 6, 7]


#============================================
def test_unprioritized_rings_are_left_out():
	mol = molecule_skeletons.cycle(8)
	molecule_skeletons.cycle(6, center=(50.0, 0.0), mol=mol)
	assert sorted(ring.size for ring in mol.rings) == [6, 8]
	assert [ring.size for ring in mol.sorted_rings] == [6]


#============================================
def test_less_shared_ring_comes_first():
	mol = molecule_skeletons.biphenyl_like()
	phenyl_ids = frozenset(atom.id for atom in mol.atoms[10:])
	ordered = mol.sorted_rings
	assert len(ordered) == 3
	assert ordered[0].atom_ids == phenyl_ids


#============================================
def test_atom_frequency_counts_fused_atoms_twice():
	mol = molecule_skeletons.naphthalene()
	frequency = mol.ring_atom_frequency()
	assert sorted(frequency.values()) == [1] * 8 + [2] * 2


#============================================
def test_ring_with_more_double_bonds_comes_first():
	mol = molecule_skeletons.cycle(6, kekule=False)
	molecule_skeletons.cycle(6, kekule=True, center=(40.0, 0.0), mol=mol)
	rings = mol.rings
	ordered = mol.sorted_rings
	assert ordered[0] == rings[1]
	assert ordered[1] == rings[0]
	assert ring_priority.double_bond_count(ordered[0]) == 3


#============================================
def test_sequencing_is_stable_for_equal_keys():
	mol = molecule_skeletons.cycle(6)
	molecule_skeletons.cycle(6, center=(40.0, 0.0), mol=mol)
	assert list(mol.sorted_rings) == list(mol.rings)


#============================================
def test_order_change_resequences_rings():
	mol = molecule_skeletons.cycle(6)
	molecule_skeletons.cycle(6, center=(40.0, 0.0), mol=mol)
	first, second = mol.rings
	assert mol.sorted_rings[0] == first
	second.bonds[0].order = 2
	assert mol.sorted_rings[0] == second
