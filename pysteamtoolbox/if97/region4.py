"""
IAPWS-IF97 Region 4: the saturation curve.

Provides:
    - tsat_p(p): saturation temperature in K from pressure in Pa (backward equation)
    - psat_t(T): saturation pressure in Pa from temperature in K (forward equation)

Valid range:
    273.15 K <= T <= 647.096 K
    611.213 Pa <= p <= 22.064 MPa

tsat_p is evaluated above the critical pressure too, since the dispatcher
needs a value there to route the query to a Region 3 rejection. It raises
SaturationCurveDomainError only where the correlation has no real root
(vanishingly small pressures).
"""

import numpy as np

from pysteamtoolbox.constants import P_STAR_R4, TC
from pysteamtoolbox.if97.coefficients import N_REGION4
from pysteamtoolbox.if97.errors import NegativePressure, SaturationCurveDomainError, SaturationCurveExceeded


def tsat_p(p):
    """
    Saturation temperature (Eq. 31).

    Parameters:
        p: pressure in Pa

    Returns:
        saturation temperature in K
    """
    if p < 0:
        raise NegativePressure(f"No saturation temperature at negative pressure (p = {p} Pa)")
    n = N_REGION4
    beta = (p / P_STAR_R4) ** 0.25

    E = beta ** 2 + n[2] * beta + n[5]
    F = n[0] * beta ** 2 + n[3] * beta + n[6]
    G = n[1] * beta ** 2 + n[4] * beta + n[7]

    disc = F ** 2 - 4 * E * G
    if disc < 0:
        raise SaturationCurveDomainError(f"Saturation curve undefined at p = {p} Pa")
    # Negative root only, the other one is unphysical
    D = 2 * G / (-F - np.sqrt(disc))

    disc2 = (n[9] + D) ** 2 - 4 * (n[8] + n[9] * D)
    if disc2 < 0:
        raise SaturationCurveDomainError(f"Saturation curve undefined at p = {p} Pa")
    return float((n[9] + D - np.sqrt(disc2)) / 2)


def psat_t(T):
    """
    Saturation pressure (Eq. 30).

    Parameters:
        T: temperature in K (273.15 - 647.096)

    Returns:
        saturation pressure in Pa
    """
    if T > TC:
        raise SaturationCurveExceeded(f"No saturation pressure above the critical temperature ({T} K > {TC} K)")
    n = N_REGION4
    theta = T + n[8] / (T - n[9])

    A = theta ** 2 + n[0] * theta + n[1]
    B = n[2] * theta ** 2 + n[3] * theta + n[4]
    C = n[5] * theta ** 2 + n[6] * theta + n[7]

    return float((2 * C / (-B + np.sqrt(B ** 2 - 4 * A * C))) ** 4 * P_STAR_R4)
