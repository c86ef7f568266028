#--------------------------------------------------------------------------
#     This file is part of RingSketch - ring perception for chemical sketches
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------


"""Molecule graph owning atoms, bonds and the ring cache."""

# Standard Library
import logging

# local repo modules
from . import geometry
from . import ring_perception
from . import ring_priority


logger = logging.getLogger(__name__)


class Molecule(object):
	"""Atom and bond arenas plus the cached ring perception result.

	Any topology change (adding or removing atoms or bonds) invalidates the
	rings. Reading rings or a bond placement rebuilds them on demand;
	callers that want the cost up front call rebuild_rings() themselves.
	"""

	def __init__(self, mol_id=None):
		self.id = mol_id
		self._atoms = {}
		self._bonds = []
		self._adjacency = {}
		self._atom_counter = 0
		self._bond_counter = 0
		self._rings = ()
		self._rings_valid = False
		self._sorted_rings = None
		self.errors = []

	def __repr__(self):
		return f"<Molecule {self.id} atoms={len(self._atoms)} bonds={len(self._bonds)}>"

	#============================================
	@property
	def atoms(self):
		return tuple(self._atoms.values())

	@property
	def bonds(self):
		return tuple(self._bonds)

	def get_atom(self, atom_id):
		return self._atoms[atom_id]

	def has_atom(self, atom_id):
		return atom_id in self._atoms

	def add_atom(self, atom):
		if atom.id is None:
			atom.id = self._next_atom_id()
		if atom.id in self._atoms:
			raise ValueError(f"Molecule already holds an atom with id {atom.id!r}")
		atom.parent = self
		atom.rings = []
		self._atoms[atom.id] = atom
		self._adjacency.setdefault(atom.id, [])
		self.invalidate_rings()
		return atom

	def remove_atom(self, atom):
		"""Remove an atom (or atom id) together with its bonds."""
		atom_id = getattr(atom, "id", atom)
		removed = self._atoms.pop(atom_id)
		for bond in list(self._adjacency.get(atom_id, [])):
			self._detach_bond(bond)
		self._adjacency.pop(atom_id, None)
		removed.parent = None
		removed.rings = []
		self.invalidate_rings()
		return removed

	def add_bond(self, bond):
		if bond.id is None:
			bond.id = self._next_bond_id()
		bond.parent = self
		bond.clear_implicit_placement()
		self._bonds.append(bond)
		for atom_id in set(bond.atom_ids):
			self._adjacency.setdefault(atom_id, []).append(bond)
		self.invalidate_rings()
		return bond

	def remove_bond(self, bond):
		self._detach_bond(bond)
		self.invalidate_rings()
		return bond

	def move_atom(self, atom_id, x, y):
		"""Move an atom; rings stay valid but placements are recomputed."""
		atom = self._atoms[atom_id]
		atom.x = x
		atom.y = y
		return atom

	def rewire_bond(self, bond, old_atom_ids):
		"""Move a bond whose ends changed to the adjacency of its new atoms."""
		for atom_id in set(old_atom_ids):
			bonds = self._adjacency.get(atom_id)
			if bonds and bond in bonds:
				bonds.remove(bond)
		for atom_id in set(bond.atom_ids):
			self._adjacency.setdefault(atom_id, []).append(bond)
		self.invalidate_rings()
		return bond

	def _detach_bond(self, bond):
		self._bonds.remove(bond)
		for atom_id in bond.atom_ids:
			bonds = self._adjacency.get(atom_id)
			if bonds and bond in bonds:
				bonds.remove(bond)
		bond.parent = None

	def _next_atom_id(self):
		self._atom_counter += 1
		while f"a{self._atom_counter}" in self._atoms:
			self._atom_counter += 1
		return f"a{self._atom_counter}"

	def _next_bond_id(self):
		self._bond_counter += 1
		used = set(bond.id for bond in self._bonds)
		while f"b{self._bond_counter}" in used:
			self._bond_counter += 1
		return f"b{self._bond_counter}"

	#============================================
	def _is_resolved(self, bond):
		start_id, end_id = bond.atom_ids
		return start_id != end_id and start_id in self._atoms and end_id in self._atoms

	def bonds_of(self, atom_id):
		"""Return bonds of an atom joining it to another existing atom."""
		return [
			bond for bond in self._adjacency.get(atom_id, [])
			if atom_id in bond.atom_ids and self._is_resolved(bond)
		]

	def neighbor_ids(self, atom_id):
		return [bond.other_atom_id(atom_id) for bond in self.bonds_of(atom_id)]

	def neighbors_of(self, atom_id):
		return [self._atoms[neighbor_id] for neighbor_id in self.neighbor_ids(atom_id)]

	def bond_between(self, atom_id1, atom_id2):
		for bond in self.bonds_of(atom_id1):
			if bond.other_atom_id(atom_id1) == atom_id2:
				return bond
		return None

	def dangling_bonds(self):
		return [
			bond for bond in self._bonds
			if not all(atom_id in self._atoms for atom_id in bond.atom_ids)
		]

	def check_atom_refs(self):
		"""Return True when every bond references atoms of this molecule."""
		return not self.dangling_bonds()

	#============================================
	@property
	def theoretical_rings(self):
		"""Cycle rank; acyclic connected molecules always give 0."""
		return len(self._bonds) - len(self._atoms) + 1

	@property
	def has_rings(self):
		return self.theoretical_rings > 0

	@property
	def rings_calculated(self):
		return self._rings_valid

	def invalidate_rings(self):
		self._rings = ()
		self._rings_valid = False
		for atom in self._atoms.values():
			atom.rings = []
		self.invalidate_placements()

	def invalidate_placements(self):
		self._sorted_rings = None
		for bond in self._bonds:
			bond.clear_implicit_placement()

	def rebuild_rings(self):
		"""Recompute the rings from scratch and replace the cache.

		Returns:
			tuple: The new ring snapshot.
		"""
		self.invalidate_rings()
		dangling = self.dangling_bonds()
		if dangling:
			logger.warning(
				"molecule %s has %d bonds to missing atoms, skipping them",
				self.id, len(dangling),
			)
		if self.theoretical_rings < 0:
			logger.warning(
				"molecule %s looks disconnected (theoretical rings %d)",
				self.id, self.theoretical_rings,
			)
		rings = ring_perception.discover_rings(self)
		for ring in rings:
			for atom_id in ring.atom_ids:
				self._atoms[atom_id].rings.append(ring)
		self._rings = tuple(rings)
		self._rings_valid = True
		return self._rings

	def ensure_rings(self):
		if not self._rings_valid:
			self.rebuild_rings()
		return self._rings

	@property
	def rings(self):
		return self.ensure_rings()

	@property
	def sorted_rings(self):
		"""Rings in double bond placement order, cached until invalidated."""
		self.ensure_rings()
		if self._sorted_rings is None:
			self._sorted_rings = tuple(ring_priority.sort_rings_for_double_bond_placement(self._rings))
		return self._sorted_rings

	def rings_containing(self, *atom_ids):
		return [ring for ring in self.rings if all(atom_id in ring for atom_id in atom_ids)]

	def ring_atom_frequency(self):
		"""Return {atom_id: number of prioritized rings holding it}."""
		return ring_priority.atom_frequency(ring_priority.prioritized_rings(self.rings))

	def refresh(self):
		self.rebuild_rings()

	#============================================
	@property
	def average_bond_length(self):
		lengths = [bond.length for bond in self._bonds if self._is_resolved(bond)]
		if not lengths:
			return 0.0
		return sum(lengths) / len(lengths)

	@property
	def centroid(self):
		return geometry.centroid(atom.position for atom in self._atoms.values())

	def clone(self):
		"""Return a deep copy with the same ids and freshly built rings."""
		other = Molecule(mol_id=self.id)
		for atom in self._atoms.values():
			other.add_atom(atom.copy())
		for bond in self._bonds:
			other.add_bond(bond.copy())
		other.rebuild_rings()
		return other
