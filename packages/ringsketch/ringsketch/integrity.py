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


"""Structural integrity checks for molecules handed to ring perception.

Ring perception itself never raises; it quietly returns fewer rings for
broken input. Editors and importers run these checks when they need the
problems spelled out.
"""

# Standard Library
import logging

# local repo modules
from . import molecule_utils


logger = logging.getLogger(__name__)


#============================================
class RingSketchError(Exception):
	"""Base class for errors raised by this library."""


#============================================
class MoleculeIntegrityError(RingSketchError):
	"""Raised when a molecule breaks a structural invariant."""

	def __init__(self, errors):
		self.errors = list(errors)
		super().__init__("; ".join(self.errors))


#============================================
def dangling_bond_errors(molecule):
	errors = []
	for bond in molecule.bonds:
		for atom_id in bond.atom_ids:
			if not molecule.has_atom(atom_id):
				errors.append(f"Bond {bond.id} references missing atom {atom_id}")
	return errors


#============================================
def self_bond_errors(molecule):
	return [
		f"Bond {bond.id} joins atom {bond.start_atom_id} to itself"
		for bond in molecule.bonds
		if bond.start_atom_id == bond.end_atom_id
	]


#============================================
def duplicate_bond_errors(molecule):
	errors = []
	seen = {}
	for bond in molecule.bonds:
		key = frozenset(bond.atom_ids)
		if key in seen:
			errors.append(f"Bond {bond.id} duplicates bond {seen[key]}")
			continue
		seen[key] = bond.id
	return errors


#============================================
def connectivity_errors(molecule):
	"""Report molecules that fall apart into several pieces."""
	errors = []
	if not molecule.atoms:
		return errors
	theoretical = molecule.theoretical_rings
	components = molecule_utils.connected_components(molecule)
	if theoretical < 0 or len(components) > 1:
		errors.append(
			f"Molecule {molecule.id} is disconnected: {len(components)} components, "
			f"theoretical rings {theoretical}"
		)
	return errors


#============================================
def check_molecule(molecule):
	"""Run all checks, store the messages on molecule.errors and return them.

	Args:
		molecule: Molecule to check.

	Returns:
		list[str]: Error messages, empty when the molecule is sound.
	"""
	errors = []
	errors.extend(dangling_bond_errors(molecule))
	errors.extend(self_bond_errors(molecule))
	errors.extend(duplicate_bond_errors(molecule))
	errors.extend(connectivity_errors(molecule))
	for message in errors:
		logger.warning(message)
	molecule.errors = list(errors)
	return errors


#============================================
def require_integrity(molecule):
	errors = check_molecule(molecule)
	if errors:
		raise MoleculeIntegrityError(errors)
	return molecule
