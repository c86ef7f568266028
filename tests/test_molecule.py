"""Tests for the molecule arena, ring cache and ring value objects."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_ringsketch_to_sys_path()

# local repo modules
import molecule_skeletons
import ringsketch


#============================================
def test_atoms_and_bonds_get_ids():
	mol = molecule_skeletons.chain(3)
	assert [atom.id for atom in mol.atoms] == ["a1", "a2", "a3"]
	assert [bond.id for bond in mol.bonds] == ["b1", "b2"]


#============================================
def test_duplicate_atom_id_is_rejected():
	mol = ringsketch.Molecule()
	mol.add_atom(ringsketch.Atom(atom_id="x"))
	with pytest.raises(ValueError):
		mol.add_atom(ringsketch.Atom(atom_id="x"))


#============================================
def test_bond_to_self_is_rejected():
	with pytest.raises(ValueError):
		ringsketch.Bond("a1", "a1")


#============================================
def test_neighbors_and_degree():
	mol = molecule_skeletons.chain(3)
	middle = mol.atoms[1]
	assert middle.degree == 2
	assert [atom.id for atom in middle.neighbors] == ["a1", "a3"]
	assert [atom.id for atom in middle.neighbors_except(mol.atoms[0])] == ["a3"]
	assert middle.bond_between(mol.atoms[2]) is mol.bonds[1]


#============================================
def test_other_atom_of_foreign_atom_raises():
	mol = molecule_skeletons.chain(3)
	with pytest.raises(ValueError):
		mol.bonds[0].other_atom_id("a3")


#============================================
def test_topology_change_invalidates_rings():
	mol = molecule_skeletons.benzene()
	mol.rebuild_rings()
	assert mol.rings_calculated
	assert all(len(atom.rings) == 1 for atom in mol.atoms)
	extra = mol.add_atom(ringsketch.Atom(0.0, 30.0))
	assert not mol.rings_calculated
	assert all(atom.rings == [] for atom in mol.atoms)
	mol.add_bond(ringsketch.Bond(mol.atoms[0].id, extra.id))
	assert len(mol.rings) == 1


#============================================
def test_removing_ring_bond_opens_ring():
	mol = molecule_skeletons.benzene()
	assert len(mol.rings) == 1
	mol.remove_bond(mol.bonds[0])
	assert mol.theoretical_rings == 0
	assert mol.rings == ()


#============================================
def test_rewired_bond_end_moves_adjacency():
	mol = molecule_skeletons.benzene()
	assert len(mol.rings) == 1
	bond = mol.bonds[0]
	bond.end_atom_id = mol.atoms[3].id
	assert not mol.rings_calculated
	assert bond not in mol.bonds_of("a2")
	assert bond in mol.bonds_of("a4")
	assert mol.atoms[1].degree == 1
	rings = mol.rebuild_rings()
	assert [ring.atom_ids for ring in rings] == [frozenset(["a1", "a4", "a5", "a6"])]


#============================================
def test_rewired_start_of_detached_bond():
	bond = ringsketch.Bond("a1", "a2")
	bond.start_atom_id = "a3"
	assert bond.atom_ids == ("a3", "a2")


#============================================
def test_removing_atom_drops_its_bonds():
	mol = molecule_skeletons.naphthalene()
	mol.remove_atom(mol.atoms[0].id)
	assert len(mol.atoms) == 9
	assert len(mol.bonds) == 8
	assert [ring.size for ring in mol.rings] == []


#============================================
def test_rebuild_returns_fresh_snapshot():
	mol = molecule_skeletons.benzene()
	first = mol.rebuild_rings()
	second = mol.rebuild_rings()
	assert first is not second
	assert first == second
	assert isinstance(second, tuple)


#============================================
def test_ring_identity_and_size():
	mol = molecule_skeletons.benzene()
	ring = mol.rings[0]
	twin = ringsketch.Ring(mol, [atom.id for atom in reversed(mol.atoms)])
	assert ring == twin
	assert hash(ring) == hash(twin)
	assert ring.unique_id == twin.unique_id
	assert ring.size == len(ring) == 6
	assert ring.priority == 1


#============================================
def test_ring_centroid_follows_atoms():
	mol = molecule_skeletons.benzene()
	ring = mol.rings[0]
	assert ring.centroid == pytest.approx((0.0, 0.0), abs=1e-9)
	for atom in mol.atoms:
		mol.move_atom(atom.id, atom.x + 10.0, atom.y)
	assert ring.centroid == pytest.approx((10.0, 0.0), abs=1e-9)
	assert mol.rings_calculated


#============================================
def test_ring_bonds_connect_consecutive_atoms():
	mol = molecule_skeletons.naphthalene()
	for ring in mol.rings:
		walk = ring.ordered_atoms()
		assert len(walk) == ring.size
		assert len(ring.bonds) == ring.size
		for first, second in zip(walk, walk[1:] + walk[:1]):
			assert mol.bond_between(first.id, second.id) is not None


#============================================
def test_average_bond_length():
	mol = molecule_skeletons.benzene()
	assert mol.average_bond_length == pytest.approx(10.0)
	assert ringsketch.Molecule().average_bond_length == 0.0


#============================================
def test_clone_is_independent():
	mol = molecule_skeletons.naphthalene()
	mol.bonds[0].placement = "clockwise"
	copy = mol.clone()
	assert copy.rings_calculated
	assert molecule_skeletons.ring_atom_ids(copy) == molecule_skeletons.ring_atom_ids(mol)
	assert copy.bonds[0].explicit_placement == 1
	copy.remove_atom(copy.atoms[0].id)
	assert len(mol.atoms) == 10


#============================================
def test_bond_order_aliases():
	mol = molecule_skeletons.chain(2)
	bond = mol.bonds[0]
	bond.order = "D"
	assert bond.is_double
	bond.order = "A"
	assert bond.order == 1.5
	with pytest.raises(ValueError):
		bond.order = 4
