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

import logging
from typing import NamedTuple, Tuple

from tabulate import tabulate

from pysteamtoolbox.classes import solve_method, region
from pysteamtoolbox.constants import SOLVER_TOL, SOLVER_MAXITER, T_GUESS
from pysteamtoolbox.validate import validate_methods
from pysteamtoolbox.if97 import (region1_pt, region1_t_ph, region2_pt, region2_t_ph, tsat_p,
                                 check_pressure, check_liquid, check_vapor, check_two_phase)

logger = logging.getLogger(__name__)


class SaturationState(NamedTuple):
    Ts: float    # Saturation temperature (K)
    rhol: float  # Saturated liquid density (kg/m3)
    hl: float    # Saturated liquid enthalpy (J/kg)
    rhog: float  # Saturated vapor density (kg/m3)
    hg: float    # Saturated vapor enthalpy (J/kg)


class PropertyResult(NamedTuple):
    rho: float   # Density (kg/m3)
    T: float     # Temperature (K)
    x: float     # Vapor quality, 0 for subcooled liquid, 1 for superheated vapor
    rhol: float  # Saturated liquid density (kg/m3)
    rhog: float  # Saturated vapor density (kg/m3)
    hl: float    # Saturated liquid enthalpy (J/kg)
    hg: float    # Saturated vapor enthalpy (J/kg)


def saturation_state(p: float) -> SaturationState:
    """ Returns saturated liquid and vapor properties at pressure p (Pa).
        Liquid side is evaluated with Region 1, vapor side with Region 2, both at Ts(p).
    """
    Ts = tsat_p(p)
    rhol, hl = region1_pt(p, Ts)
    rhog, hg = region2_pt(p, Ts)
    return SaturationState(Ts, rhol, hl, rhog, hg)


def steam_ph_region(
    p: float,
    h: float,
    solver: solve_method = solve_method.BRENTQ,
    tol: float = SOLVER_TOL,
    maxiter: int = SOLVER_MAXITER,
    t_guess: float = T_GUESS,
) -> Tuple[PropertyResult, region]:
    """ Returns (PropertyResult, region) for pure water or steam from pressure and specific enthalpy.
        Arguments are as for steam_ph. region is the IAPWS-IF97 region the state was resolved in,
        region.LIQUID, region.VAPOR or region.TWO_PHASE.

        Raises an IF97Error subclass if the state lies outside Regions 1, 2 and 4
    """
    solver = validate_methods(["solvemethod"], [solver])

    check_pressure(p)
    Ts, rhol, hl, rhog, hg = saturation_state(p)

    if h < hl:
        logger.debug("steam_ph: p=%s, h=%s below hl=%.3f, subcooled liquid", p, h, hl)
        check_liquid(Ts)
        T = region1_t_ph(p, h)
        rho, _ = region1_pt(p, T)
        return PropertyResult(rho, T, 0, rhol, rhog, hl, hg), region.LIQUID

    if h > hg:
        logger.debug("steam_ph: p=%s, h=%s above hg=%.3f, superheated vapor", p, h, hg)
        T = region2_t_ph(p, h, t_lo=Ts, method=solver, tol=tol, maxiter=maxiter, t_guess=t_guess)
        check_vapor(p, T)
        rho, _ = region2_pt(p, T)
        logger.info("Superheated steam")
        return PropertyResult(rho, T, 1, rhol, rhog, hl, hg), region.VAPOR

    logger.debug("steam_ph: p=%s, h=%s between hl=%.3f and hg=%.3f, two-phase", p, h, hl, hg)
    check_two_phase(Ts)
    x = (h - hl) / (hg - hl)
    # Not weighted by quality, see README known discrepancy
    rho = 1 / (1 / rhol + 1 / rhog)
    return PropertyResult(rho, Ts, x, rhol, rhog, hl, hg), region.TWO_PHASE


def steam_ph(
    p: float,
    h: float,
    solver: solve_method = solve_method.BRENTQ,
    tol: float = SOLVER_TOL,
    maxiter: int = SOLVER_MAXITER,
    t_guess: float = T_GUESS,
) -> PropertyResult:
    """ Returns properties of pure water or steam from pressure and specific enthalpy (IAPWS-IF97)
        Fields of the returned PropertyResult, in order:
            rho: Density (kg/m3)
            T: Temperature (K)
            x: Vapor quality (0 subcooled liquid, 0-1 two-phase, 1 superheated vapor)
            rhol, rhog: Saturated liquid and vapor density (kg/m3)
            hl, hg: Saturated liquid and vapor enthalpy (J/kg)

        p: Pressure (Pa)
        h: Specific enthalpy (J/kg)
        solver: Method for inverting Region 2 enthalpy to temperature
                'BRENTQ' Brent's method bracketed between saturation temperature and 1073.15 K (Default)
                'NEWTON' Secant iteration starting from t_guess
                'BISECT' Bisection on the same bracket as 'BRENTQ'
        tol: Absolute temperature tolerance for the Region 2 solve (K). Defaults to 1e-9
        maxiter: Iteration cap for the Region 2 solve. Defaults to 100
        t_guess: Starting temperature for 'NEWTON' (K). Defaults to 1000

        Raises an IF97Error subclass if the state lies outside Regions 1, 2 and 4
    """
    result, _ = steam_ph_region(p, h, solver=solver, tol=tol, maxiter=maxiter, t_guess=t_guess)
    return result


evaluate = steam_ph


def steam_summary(result: PropertyResult, reg: region = None) -> str:
    """ Returns a text table of a PropertyResult, for printing or reports.
        reg: Region from steam_ph_region. Adds a Region row, and a note for superheated steam
    """
    values = [
        ["Density (kg/m3)", result.rho],
        ["Temperature (K)", result.T],
        ["Quality", result.x],
        ["Sat. liquid density (kg/m3)", result.rhol],
        ["Sat. vapor density (kg/m3)", result.rhog],
        ["Sat. liquid enthalpy (J/kg)", result.hl],
        ["Sat. vapor enthalpy (J/kg)", result.hg],
    ]
    rows = []
    if reg is not None:
        rows.append(["Region", reg.name])
    rows += [[name, f"{val:.6g}"] for name, val in values]
    if reg == region.VAPOR:
        rows.append(["Note", "Superheated steam"])
    return tabulate(rows, headers=["Property", "Value"], disable_numparse=True)
