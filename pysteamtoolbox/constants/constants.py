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

# Constants (SI units throughout: Pa, K, J/kg)
R_WATER = 461.526  # Specific gas constant for water, J/(kg.K)
TC = 647.096  # Critical temperature (K)
PC = 22.064e6  # Critical pressure (Pa)
T_TRIPLE = 273.16  # Triple point temperature (K)
P_TRIPLE = 611.657  # Triple point pressure (Pa)

# Reference scalings used to reduce pressure, temperature and enthalpy
P_STAR_R1 = 16.53e6  # Region 1 Gibbs equation (Pa)
T_STAR_R1 = 1386.0  # Region 1 Gibbs equation (K)
P_STAR_R1_BACK = 1e6  # Region 1 backward T(p,h) (Pa)
H_STAR_R1_BACK = 2500e3  # Region 1 backward T(p,h) (J/kg)
P_STAR_R2 = 1e6  # Region 2 Gibbs equation (Pa)
T_STAR_R2 = 540.0  # Region 2 Gibbs equation (K)
P_STAR_R4 = 1e6  # Saturation curve (Pa)
P_STAR_B23 = 1e6  # Region 2/3 boundary curve (Pa)

# Region limits
T_R1_MAX = 623.15  # Upper temperature of Region 1, above which liquid lies in Region 3 (K)
P_B23_MIN = 16.5292e6  # Saturation pressure at 623.15 K, lowest pressure touching Region 3 (Pa)
T_R2_MAX = 1073.15  # Upper temperature of Region 2 (K)

# Region 2 temperature inversion defaults
SOLVER_TOL = 1e-9  # Absolute temperature tolerance (K)
SOLVER_MAXITER = 100  # Iteration cap for all solver methods
T_GUESS = 1000.0  # Newton starting temperature (K)
