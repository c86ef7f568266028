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


"""Bond edge of the molecule graph with double bond placement."""

# local repo modules
from . import bond_placement
from . import bond_semantics
from . import geometry


class Bond(object):
	"""Graph edge referencing its two atoms by id.

	The placement of a double bond tells the renderer on which side of the
	main line the second line goes. An explicit placement always wins;
	otherwise the implicit one is resolved from rings and ligands and cached
	until the owning molecule invalidates it.
	"""

	def __init__(self, start_atom_id, end_atom_id, order=1, stereo="none", bond_id=None):
		if start_atom_id == end_atom_id:
			raise ValueError(f"Bond cannot join atom {start_atom_id!r} to itself")
		self.id = bond_id
		self._start_atom_id = start_atom_id
		self._end_atom_id = end_atom_id
		self.parent = None
		self._order = bond_semantics.normalize_bond_order(order)
		self._stereo = bond_semantics.normalize_bond_stereo(stereo)
		self._explicit_placement = None
		self._implicit_placement = None

	def __repr__(self):
		return f"<Bond {self.id} {self.start_atom_id}-{self.end_atom_id} order={self._order:g}>"

	#============================================
	@property
	def order(self):
		return self._order

	@order.setter
	def order(self, value):
		self._order = bond_semantics.normalize_bond_order(value)
		# double bond counts drive the ring sequence
		if self.parent is not None:
			self.parent.invalidate_placements()

	@property
	def stereo(self):
		return self._stereo

	@stereo.setter
	def stereo(self, value):
		self._stereo = bond_semantics.normalize_bond_stereo(value)

	@property
	def is_double(self):
		return self._order == bond_semantics.DOUBLE_ORDER

	#============================================
	@property
	def start_atom_id(self):
		return self._start_atom_id

	@start_atom_id.setter
	def start_atom_id(self, atom_id):
		self._rewire(atom_id, self._end_atom_id)

	@property
	def end_atom_id(self):
		return self._end_atom_id

	@end_atom_id.setter
	def end_atom_id(self, atom_id):
		self._rewire(self._start_atom_id, atom_id)

	def _rewire(self, start_atom_id, end_atom_id):
		old_atom_ids = self.atom_ids
		self._start_atom_id = start_atom_id
		self._end_atom_id = end_atom_id
		self._implicit_placement = None
		if self.parent is not None:
			self.parent.rewire_bond(self, old_atom_ids)

	@property
	def atom_ids(self):
		return (self.start_atom_id, self.end_atom_id)

	@property
	def start_atom(self):
		return self.parent.get_atom(self.start_atom_id)

	@property
	def end_atom(self):
		return self.parent.get_atom(self.end_atom_id)

	@property
	def atoms(self):
		return [self.start_atom, self.end_atom]

	def other_atom_id(self, atom_id):
		if atom_id == self.start_atom_id:
			return self.end_atom_id
		if atom_id == self.end_atom_id:
			return self.start_atom_id
		raise ValueError(f"Atom {atom_id!r} is not part of bond {self.id!r}")

	def other_atom(self, atom):
		return self.parent.get_atom(self.other_atom_id(atom.id))

	def reverse(self):
		"""Swap start and end atoms; the implicit placement is recomputed."""
		self._start_atom_id, self._end_atom_id = self._end_atom_id, self._start_atom_id
		self._implicit_placement = None

	#============================================
	@property
	def midpoint(self):
		return geometry.midpoint(self.start_atom.position, self.end_atom.position)

	@property
	def vector(self):
		return geometry.subtract(self.end_atom.position, self.start_atom.position)

	@property
	def length(self):
		return geometry.distance(self.start_atom.position, self.end_atom.position)

	#============================================
	@property
	def rings(self):
		return self.parent.rings_containing(self.start_atom_id, self.end_atom_id)

	@property
	def primary_ring(self):
		return bond_placement.primary_ring(self)

	def is_cyclic(self):
		return bool(self.rings)

	#============================================
	@property
	def explicit_placement(self):
		return self._explicit_placement

	@explicit_placement.setter
	def explicit_placement(self, value):
		self._explicit_placement = bond_semantics.normalize_bond_direction(value)

	@property
	def implicit_placement(self):
		if self._implicit_placement is None:
			self._implicit_placement = bond_placement.resolve_placement(self)
		return self._implicit_placement

	def clear_implicit_placement(self):
		self._implicit_placement = None

	@property
	def placement(self):
		"""Resolved placement: CLOCKWISE, ANTICLOCKWISE or NONE."""
		if not self.is_double:
			return bond_semantics.NONE
		if self.parent is None:
			# a detached bond has no rings or ligands to resolve against
			if self._explicit_placement is not None:
				return self._explicit_placement
			return bond_semantics.NONE
		self.parent.ensure_rings()
		if self._explicit_placement is not None:
			return self._explicit_placement
		return self.implicit_placement

	@placement.setter
	def placement(self, value):
		self.explicit_placement = value

	#============================================
	def copy(self):
		"""Return a detached copy; the implicit placement is not carried over."""
		other = Bond(
			self.start_atom_id,
			self.end_atom_id,
			order=self._order,
			stereo=self._stereo,
			bond_id=self.id,
		)
		other._explicit_placement = self._explicit_placement
		return other
