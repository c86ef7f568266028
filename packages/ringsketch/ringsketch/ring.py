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


"""Ring value object holding atom handles of one perceived cycle."""

# local repo modules
from . import geometry
from . import ring_priority


class Ring(object):
	"""One minimal cycle found by ring perception.

	The ring keeps only atom ids; positions and bonds are looked up through
	the owning molecule, so a ring never outlives the cache it came from in
	any meaningful way. Two rings over the same atom set compare equal.
	"""

	def __init__(self, molecule, atom_ids):
		self.parent = molecule
		self.atom_ids = frozenset(atom_ids)
		self.unique_id = "|".join(sorted(str(atom_id) for atom_id in self.atom_ids))

	def __repr__(self):
		return f"<Ring size={self.size} priority={self.priority} {self.unique_id}>"

	def __eq__(self, other):
		if not isinstance(other, Ring):
			return NotImplemented
		return self.atom_ids == other.atom_ids

	def __hash__(self):
		return hash(self.atom_ids)

	def __contains__(self, atom_id):
		return atom_id in self.atom_ids

	def __len__(self):
		return len(self.atom_ids)

	#============================================
	@property
	def size(self):
		return len(self.atom_ids)

	@property
	def priority(self):
		return ring_priority.ring_priority(self.size)

	@property
	def atoms(self):
		"""Member atoms in molecule insertion order."""
		return [atom for atom in self.parent.atoms if atom.id in self.atom_ids]

	@property
	def bonds(self):
		return [
			bond for bond in self.parent.bonds
			if bond.start_atom_id in self.atom_ids and bond.end_atom_id in self.atom_ids
		]

	@property
	def centroid(self):
		return geometry.centroid(atom.position for atom in self.atoms)

	def contains_bond(self, bond):
		return bond.start_atom_id in self.atom_ids and bond.end_atom_id in self.atom_ids

	#============================================
	def ordered_atoms(self):
		"""Walk around the ring and return its atoms in cyclic order.

		Starts from the first member in molecule order and always steps to
		the first unvisited member neighbour.
		"""
		members = self.atoms
		if not members:
			return []
		walk = [members[0]]
		visited = set([members[0].id])
		while len(walk) < len(members):
			current = walk[-1]
			step = None
			for neighbor in current.neighbors:
				if neighbor.id in self.atom_ids and neighbor.id not in visited:
					step = neighbor
					break
			if step is None:
				break
			walk.append(step)
			visited.add(step.id)
		return walk
