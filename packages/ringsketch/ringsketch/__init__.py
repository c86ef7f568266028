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


"""Ring perception and double bond placement for 2-D chemical sketches."""

# local repo modules
from . import bond_placement
from . import bond_semantics
from . import geometry
from . import integrity
from . import molecule_utils
from . import ring_perception
from . import ring_priority
from .atom import Atom
from .bond import Bond
from .integrity import MoleculeIntegrityError
from .integrity import RingSketchError
from .molecule import Molecule
from .ring import Ring


__version__ = "0.1.0"

__all__ = [
	"Atom",
	"Bond",
	"Molecule",
	"MoleculeIntegrityError",
	"Ring",
	"RingSketchError",
	"bond_placement",
	"bond_semantics",
	"geometry",
	"integrity",
	"molecule_utils",
	"ring_perception",
	"ring_priority",
]
