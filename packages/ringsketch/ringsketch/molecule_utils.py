#--------------------------------------------------------------------------
#     This file is part of RingSketch - ring perception for chemical sketches
#--------------------------------------------------------------------------

"""Helpers for molecule graph manipulation."""

# Standard Library
import collections


#============================================
def connected_components(molecule):
	"""Return the connected components as lists of atom ids.

	Components and their members follow molecule insertion order.
	"""
	components = []
	seen = set()
	for atom in molecule.atoms:
		if atom.id in seen:
			continue
		component = []
		seen.add(atom.id)
		queue = collections.deque([atom.id])
		while queue:
			atom_id = queue.popleft()
			component.append(atom_id)
			for neighbor_id in molecule.neighbor_ids(atom_id):
				if neighbor_id not in seen:
					seen.add(neighbor_id)
					queue.append(neighbor_id)
		components.append(component)
	return components


#============================================
def merge_molecules(molecules):
	"""Merge molecules into one disconnected graph.

	Atoms and bonds are copied and renumbered, the inputs stay untouched.
	"""
	if not molecules:
		return None
	if len(molecules) == 1:
		return molecules[0]
	first = molecules[0]
	merged = type(first)(mol_id=first.id)
	for part in molecules:
		atom_map = {}
		for original_atom in part.atoms:
			copied_atom = original_atom.copy()
			copied_atom.id = None
			merged.add_atom(copied_atom)
			atom_map[original_atom.id] = copied_atom.id
		for original_bond in part.bonds:
			if not part.has_atom(original_bond.start_atom_id) or not part.has_atom(original_bond.end_atom_id):
				continue
			copied_bond = original_bond.copy()
			copied_bond.id = None
			copied_bond.start_atom_id = atom_map[original_bond.start_atom_id]
			copied_bond.end_atom_id = atom_map[original_bond.end_atom_id]
			merged.add_bond(copied_bond)
	return merged


#============================================
def split_molecule(molecule):
	"""Split a molecule into one new molecule per connected component.

	Atom and bond ids are kept. A connected molecule yields a single copy.
	"""
	parts = []
	for index, component in enumerate(connected_components(molecule), start=1):
		members = set(component)
		part_id = None if molecule.id is None else f"{molecule.id}.{index}"
		part = type(molecule)(mol_id=part_id)
		for atom_id in component:
			part.add_atom(molecule.get_atom(atom_id).copy())
		for bond in molecule.bonds:
			if bond.start_atom_id in members and bond.end_atom_id in members:
				part.add_bond(bond.copy())
		parts.append(part)
	return parts
