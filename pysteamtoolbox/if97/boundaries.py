"""
Region boundary checks for IAPWS-IF97.

Each check raises its own IF97Error subclass when a state falls outside the
regions implemented here. Nothing is clamped.
"""

import numpy as np

from pysteamtoolbox.constants import TC, T_R1_MAX, P_B23_MIN, P_STAR_B23
from pysteamtoolbox.if97.coefficients import N_B23
from pysteamtoolbox.if97.errors import (NegativePressure, UnsupportedRegion3Liquid,
                                        UnsupportedRegion3Vapor, SaturationCurveExceeded)


def b23_p_t(T):
    """ Pressure (Pa) on the Region 2/3 boundary at temperature T (K), Eq. 5 """
    n = N_B23
    return float((n[0] + n[1] * T + n[2] * T ** 2) * P_STAR_B23)


def b23_t_p(p):
    """ Temperature (K) on the Region 2/3 boundary at pressure p (Pa), Eq. 6.
        Defined for p >= 16.5292 MPa.
    """
    n = N_B23
    pi = p / P_STAR_B23
    if pi < n[4]:
        raise ValueError(f"B23 boundary is not defined below {n[4]} MPa, got p = {p} Pa")
    return float(n[3] + np.sqrt((pi - n[4]) / n[2]))


def check_pressure(p):
    if p < 0:
        raise NegativePressure(f"Out of bounds, negative pressure (p = {p} Pa)")


def check_liquid(Ts):
    """ Liquid whose saturation temperature exceeds 623.15 K lies in Region 3 """
    if Ts > T_R1_MAX:
        raise UnsupportedRegion3Liquid(f"Out of bounds, liquid Region 3 (Ts = {Ts:.3f} K > {T_R1_MAX} K)")


def check_vapor(p, T):
    """ Vapor at or above 16.5292 MPa must be hotter than the B23 boundary """
    if p >= P_B23_MIN:
        theta = b23_t_p(p)
        if T < theta:
            raise UnsupportedRegion3Vapor(
                f"Out of bounds, vapor Region 3 (T = {T:.3f} K below B23 boundary {theta:.3f} K at p = {p} Pa)"
            )


def check_two_phase(Ts):
    if Ts > TC:
        raise SaturationCurveExceeded(
            f"Out of bounds, maximum temperature for Region 4 exceeded (Ts = {Ts:.3f} K > {TC} K)"
        )
