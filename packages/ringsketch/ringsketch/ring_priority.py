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


"""Ring priorities and ring ordering for double bond placement.

Follows A. M. Clark, Rendering molecular sketches for publication quality
output, Mol. Inf. 2013, 32, 291-301 (doi:10.1002/minf.201200171).
"""


# lower rank is preferred, 0 means the ring takes no part
RING_SIZE_PRIORITY = {
	6: 1,
	5: 2,
	7: 3,
	4: 4,
	3: 5,
}


#============================================
def ring_priority(size):
	return RING_SIZE_PRIORITY.get(size, 0)


#============================================
def prioritized_rings(rings):
	"""Return rings with a non-zero priority, best rank first (stable)."""
	ranked = [ring for ring in rings if ring.priority > 0]
	return sorted(ranked, key=lambda ring: ring.priority)


#============================================
def atom_frequency(rings):
	"""Return {atom_id: number of rings containing the atom}."""
	frequency = {}
	for ring in rings:
		for atom_id in ring.atom_ids:
			frequency[atom_id] = frequency.get(atom_id, 0) + 1
	return frequency


#============================================
def cumulative_frequency(ring, frequency):
	return sum(frequency.get(atom_id, 0) for atom_id in ring.atom_ids)


#============================================
def double_bond_count(ring):
	return sum(1 for bond in ring.bonds if bond.is_double)


#============================================
def sort_rings_for_double_bond_placement(rings):
	"""Order rings for sequential double bond placement.

	1. keep sizes 6, 5, 7, 4, 3 in that order
	2. stable sort by the summed ring count of member atoms, lowest first
	3. stable sort by double bonds already in the ring, highest first

	Args:
		rings: Perceived rings of one molecule.

	Returns:
		list: Ordered rings.
	"""
	ordered = prioritized_rings(rings)
	frequency = atom_frequency(ordered)
	ordered = sorted(ordered, key=lambda ring: cumulative_frequency(ring, frequency))
	double_bonds = {ring: double_bond_count(ring) for ring in ordered}
	ordered = sorted(ordered, key=lambda ring: -double_bonds[ring])
	return ordered
