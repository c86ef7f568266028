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


"""Atom vertex of the molecule graph."""


HYDROGEN_SYMBOLS = ("H",)


class Atom(object):
	"""Graph vertex with a stable id and a 2-D position.

	Connectivity is not stored on the atom; it is looked up through the
	owning molecule, which keeps the atom and bond arenas.
	"""

	def __init__(self, x=0.0, y=0.0, symbol="C", atom_id=None):
		self.id = atom_id
		self.parent = None
		self._x = float(x)
		self._y = float(y)
		self._symbol = symbol
		# rings this atom belongs to, filled by ring discovery
		self.rings = []

	def __repr__(self):
		return f"<Atom {self.id} {self.symbol} ({self.x:g}, {self.y:g})>"

	#============================================
	# position and element feed the cached double bond placements
	@property
	def x(self):
		return self._x

	@x.setter
	def x(self, value):
		self._x = float(value)
		self._invalidate_placements()

	@property
	def y(self):
		return self._y

	@y.setter
	def y(self, value):
		self._y = float(value)
		self._invalidate_placements()

	@property
	def symbol(self):
		return self._symbol

	@symbol.setter
	def symbol(self, value):
		self._symbol = value
		self._invalidate_placements()

	def _invalidate_placements(self):
		if self.parent is not None:
			self.parent.invalidate_placements()

	#============================================
	@property
	def position(self):
		return (self.x, self.y)

	@property
	def is_hydrogen(self):
		return self.symbol in HYDROGEN_SYMBOLS

	@property
	def bonds(self):
		if self.parent is None:
			return []
		return self.parent.bonds_of(self.id)

	@property
	def degree(self):
		return len(self.bonds)

	@property
	def neighbors(self):
		if self.parent is None:
			return []
		return self.parent.neighbors_of(self.id)

	def neighbors_except(self, *ignored):
		ignored_ids = set(atom.id for atom in ignored)
		return [atom for atom in self.neighbors if atom.id not in ignored_ids]

	def bond_between(self, other):
		if self.parent is None:
			return None
		return self.parent.bond_between(self.id, other.id)

	def copy(self):
		"""Return a detached copy keeping id, position and symbol."""
		return Atom(x=self.x, y=self.y, symbol=self.symbol, atom_id=self.id)
