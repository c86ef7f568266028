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

"""Bond order, stereo and placement vocabulary with normalization helpers."""


BOND_ORDERS = (0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0)
ORDER_ALIASES = {
	"hbond": 0.0,
	"other": 0.0,
	"0": 0.0,
	"0.5": 0.5,
	"partial01": 0.5,
	"S": 1.0,
	"1": 1.0,
	"1.5": 1.5,
	"A": 1.5,
	"partial12": 1.5,
	"D": 2.0,
	"2": 2.0,
	"2.5": 2.5,
	"partial23": 2.5,
	"T": 3.0,
	"3": 3.0,
}
DOUBLE_ORDER = 2.0

BOND_STEREOS = (
	"none",
	"wedge",
	"hatch",
	"indeterminate",
	"cis",
	"trans",
)
LEGACY_STEREOS = {
	"n": "none",
	"w": "wedge",
	"h": "hatch",
	"s": "indeterminate",
}

ANTICLOCKWISE = -1
NONE = 0
CLOCKWISE = 1
BOND_DIRECTIONS = (ANTICLOCKWISE, NONE, CLOCKWISE)


#============================================
def normalize_bond_order(order):
	"""Normalize a bond order given as a number or a CML-style string.

	Args:
		order: Number (1, 1.5, 2...) or string ("S", "D", "A", "hbond"...).

	Returns:
		float: One of BOND_ORDERS.
	"""
	if isinstance(order, str):
		text = order.strip()
		if text in ORDER_ALIASES:
			return ORDER_ALIASES[text]
		for candidate in (text.upper(), text.lower()):
			if candidate in ORDER_ALIASES:
				return ORDER_ALIASES[candidate]
		raise ValueError(f"Unknown bond order: {order!r}")
	value = float(order)
	if value not in BOND_ORDERS:
		raise ValueError(f"Unsupported bond order: {order!r}")
	return value


#============================================
def normalize_bond_stereo(stereo):
	"""Normalize a bond stereo flag, accepting OASA single-char types."""
	if stereo is None:
		return "none"
	text = str(stereo).strip().lower()
	text = LEGACY_STEREOS.get(text, text)
	if text not in BOND_STEREOS:
		raise ValueError(f"Unknown bond stereo: {stereo!r}")
	return text


#============================================
def normalize_bond_direction(direction):
	"""Normalize a placement value given as an int sign or a name."""
	if direction is None:
		return None
	if isinstance(direction, str):
		names = {
			"anticlockwise": ANTICLOCKWISE,
			"none": NONE,
			"clockwise": CLOCKWISE,
		}
		key = direction.strip().lower()
		if key not in names:
			raise ValueError(f"Unknown bond direction: {direction!r}")
		return names[key]
	if direction not in BOND_DIRECTIONS:
		raise ValueError(f"Unknown bond direction: {direction!r}")
	return int(direction)


#============================================
def direction_name(direction):
	if direction == CLOCKWISE:
		return "clockwise"
	if direction == ANTICLOCKWISE:
		return "anticlockwise"
	return "none"


#============================================
def sign(value, epsilon=0.0):
	"""Return the placement sign of a scalar (cross product)."""
	if value > epsilon:
		return CLOCKWISE
	if value < -epsilon:
		return ANTICLOCKWISE
	return NONE
