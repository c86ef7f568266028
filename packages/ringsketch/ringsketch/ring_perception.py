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


"""Ring perception after Figueras.

J. Figueras, J. Chem. Inf. Comput. Sci. 1996, 36, 986-991.

Side chains are pruned from a degree projection of the molecule, then the
highest degree survivor seeds a breadth-first search that returns the first
ring closing through it. Ring atoms are consumed from the projection and
the loop repeats until nothing is left.
"""

# Standard Library
import collections
import logging

# local repo modules
from . import ring as ring_module


logger = logging.getLogger(__name__)


#============================================
def degree_projection(molecule):
	"""Return {atom_id: degree} for every atom, in molecule order."""
	return {atom.id: atom.degree for atom in molecule.atoms}


#============================================
def prune_atom(atom_id, projection, molecule):
	"""Remove one atom from the projection, lowering its neighbours' degree."""
	for neighbor_id in molecule.neighbor_ids(atom_id):
		if neighbor_id in projection:
			projection[neighbor_id] -= 1
	del projection[atom_id]


#============================================
def prune_side_chains(projection, molecule):
	"""Strip atoms of projected degree below 2 until none are left.

	The projection is modified in place, the molecule never is.

	Args:
		projection (dict): atom id -> degree within the projection.
		molecule: Molecule the ids belong to.

	Returns:
		dict: The same projection, for chaining.
	"""
	has_pruned = True
	while has_pruned:
		terminal = [atom_id for atom_id, degree in projection.items() if degree < 2]
		has_pruned = bool(terminal)
		for atom_id in terminal:
			prune_atom(atom_id, projection, molecule)
	return projection


#============================================
def find_ring(molecule, start_atom_id):
	"""Return the first ring closing through start_atom_id, or None.

	The search walks the full molecule graph, not the pruned projection.
	"""
	path = {atom.id: set() for atom in molecule.atoms}
	queue = collections.deque()
	for neighbor_id in molecule.neighbor_ids(start_atom_id):
		path[neighbor_id] = set([start_atom_id, neighbor_id])
		queue.append((start_atom_id, neighbor_id))

	while queue:
		source_id, current_id = queue.popleft()
		for m_id in molecule.neighbor_ids(current_id):
			if m_id == source_id:
				continue
			if not path.get(m_id):
				path[m_id] = path[current_id] | set([m_id])
				queue.append((current_id, m_id))
				continue
			# collision, a singleton overlap closes a ring
			overlap = path[current_id] & path[m_id]
			if len(overlap) == 1:
				return ring_module.Ring(molecule, path[current_id] | path[m_id])
	return None


#============================================
def discover_rings(molecule):
	"""Return the list of rings for the molecule.

	Never raises for ring-free or disconnected input; it only yields fewer
	rings.
	"""
	rings = []
	if not molecule.has_rings:
		return rings
	projection = degree_projection(molecule)
	prune_side_chains(projection, molecule)
	while projection:
		# max() keeps the first atom among equal degrees
		start_atom_id = max(projection, key=lambda atom_id: molecule.get_atom(atom_id).degree)
		ring = find_ring(molecule, start_atom_id)
		if ring is None:
			logger.debug("atom %s closes no ring", start_atom_id)
			del projection[start_atom_id]
			continue
		rings.append(ring)
		for atom_id in ring.atom_ids:
			projection.pop(atom_id, None)
	logger.debug("found %d rings in %d theoretical", len(rings), molecule.theoretical_rings)
	return rings
