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


"""Double bond placement after Clark's sketch rules.

A double bond is drawn as the main line plus a second line offset to one
side. Ring bonds put the second line toward the centre of their primary
ring. Chain bonds look at the substituents (ligands) on both ends and put
the second line on the side of the single heavy substituent when that side
is unambiguous. The side is reported as the sign of the cross product of
the chosen vector and the bond vector.
"""

# Standard Library
import dataclasses
import logging

# local repo modules
from . import atom as atom_module
from . import bond_semantics
from . import geometry


logger = logging.getLogger(__name__)

LIGAND_DISPLACEMENT = 3.0


#============================================
@dataclasses.dataclass(frozen=True)
class PlacementConstraints:
	"""Tunables for the ligand heuristic."""
	displacement_length: float = LIGAND_DISPLACEMENT
	hydrogen_symbols: tuple = atom_module.HYDROGEN_SYMBOLS
	epsilon: float = geometry.EPSILON


DEFAULT_CONSTRAINTS = PlacementConstraints()


#============================================
def primary_ring(bond):
	"""Return the first sequenced ring holding both bond atoms, or None."""
	for ring in bond.parent.sorted_rings:
		if ring.contains_bond(bond):
			return ring
	return None


#============================================
def cyclic_double_bond_vector(bond):
	"""Return the vector from the bond midpoint to its primary ring centre."""
	ring = primary_ring(bond)
	if ring is None:
		return None
	return geometry.subtract(ring.centroid, bond.midpoint)


#============================================
def ligand_displacement_vector(bond, anchor, ligand, constraints=DEFAULT_CONSTRAINTS):
	"""Return the bond normal pointing toward ligand, scaled.

	anchor is the bond atom that carries ligand.
	"""
	normal = geometry.normalize(geometry.perpendicular(bond.vector))
	if normal is None:
		return None
	positive = geometry.scale(normal, constraints.displacement_length)
	negative = geometry.scale(positive, -1.0)
	positive_end = geometry.add(anchor.position, positive)
	negative_end = geometry.add(anchor.position, negative)
	if geometry.distance(ligand.position, positive_end) < geometry.distance(ligand.position, negative_end):
		return positive
	return negative


#============================================
def atoms_are_cis(bond, ligand_a, ligand_b):
	"""Return True when two ligands sit on the same side of the bond.

	Segments end->ligand_a and start->ligand_b cross for a cis pair when
	ligand_a hangs on the start atom.
	"""
	if ligand_a is None or ligand_b is None:
		return False
	start = bond.start_atom
	end = bond.end_atom
	start_neighbor_ids = set(atom.id for atom in start.neighbors)
	if ligand_a.id not in start_neighbor_ids:
		ligand_a, ligand_b = ligand_b, ligand_a
	return geometry.segments_intersect(
		end.position, ligand_a.position,
		start.position, ligand_b.position,
	)


#============================================
def _is_hydrogen(atom, constraints):
	return atom.symbol in constraints.hydrogen_symbols


#============================================
def acyclic_double_bond_vector(bond, constraints=DEFAULT_CONSTRAINTS):
	"""Return the ligand-pattern displacement vector of a chain bond, or None."""
	start = bond.start_atom
	end = bond.end_atom
	start_ligands = start.neighbors_except(end)
	end_ligands = end.neighbors_except(start)
	if not start_ligands or not end_ligands:
		return None
	if len(start_ligands) > 2 or len(end_ligands) > 2:
		return None
	if len(start_ligands) == 2 and len(end_ligands) == 2:
		return None

	start_heavy = [atom for atom in start_ligands if not _is_hydrogen(atom, constraints)]
	end_heavy = [atom for atom in end_ligands if not _is_hydrogen(atom, constraints)]
	start_h_count = len(start_ligands) - len(start_heavy)
	end_h_count = len(end_ligands) - len(end_heavy)
	if not start_heavy and not end_heavy:
		return None
	if start_h_count == 0 and end_h_count == 0:
		return None

	start_qualifies = len(start_heavy) == 1
	end_qualifies = len(end_heavy) == 1
	if start_qualifies and end_qualifies:
		if not atoms_are_cis(bond, start_heavy[0], end_heavy[0]):
			logger.debug("bond %s is trans, no preferred side", bond.id)
			return None
		if len(end_ligands) < len(start_ligands):
			return ligand_displacement_vector(bond, end, end_heavy[0], constraints)
		return ligand_displacement_vector(bond, start, start_heavy[0], constraints)
	if start_qualifies:
		return ligand_displacement_vector(bond, start, start_heavy[0], constraints)
	if end_qualifies:
		return ligand_displacement_vector(bond, end, end_heavy[0], constraints)
	return None


#============================================
def double_bond_vector(bond, constraints=DEFAULT_CONSTRAINTS):
	if bond.is_cyclic():
		return cyclic_double_bond_vector(bond)
	return acyclic_double_bond_vector(bond, constraints)


#============================================
def resolve_placement(bond, constraints=None):
	"""Return CLOCKWISE, ANTICLOCKWISE or NONE for a bond.

	Args:
		bond: Bond attached to a molecule with up to date rings.
		constraints (PlacementConstraints): Optional tunables.

	Returns:
		int: Placement sign from bond_semantics.
	"""
	if constraints is None:
		constraints = DEFAULT_CONSTRAINTS
	vector = double_bond_vector(bond, constraints)
	if vector is None:
		return bond_semantics.NONE
	cross = geometry.cross_product(vector, bond.vector)
	return bond_semantics.sign(cross, constraints.epsilon)
