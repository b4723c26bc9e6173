#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

from enum import Enum

class solve_method(Enum):  # Region 2 temperature from enthalpy inversion method
    BRENTQ = 0
    NEWTON = 1
    BISECT = 2

class region(Enum):  # IAPWS-IF97 region a resolved state was evaluated in
    LIQUID = 1
    VAPOR = 2
    TWO_PHASE = 4

class_dic = {
    "solvemethod": solve_method,
}
