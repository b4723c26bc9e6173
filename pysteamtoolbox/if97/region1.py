"""
IAPWS-IF97 Region 1: Compressed liquid water properties.

Provides:
    - gamma_region1(p, T): dimensionless Gibbs free energy and its pi, tau derivatives
    - region1_pt(p, T): density in kg/m3 and specific enthalpy in J/kg
    - region1_t_ph(p, h): temperature in K from the backward equation

Valid range (Region 1):
    273.15 K <= T <= 623.15 K  (0-350 C)
    p_sat(T) <= p <= 100 MPa

Units: p in Pa, T in K, h in J/kg
"""

import numpy as np

from pysteamtoolbox.constants import R_WATER
from pysteamtoolbox.if97.coefficients import REGION1, REGION1_TPH


def gamma_region1(p, T):
    """
    gamma     = sum( n_i * (7.1 - pi)^I_i * (tau - 1.222)^J_i )
    gamma_pi  = sum( -n_i * I_i * (7.1 - pi)^(I_i - 1) * (tau - 1.222)^J_i )
    gamma_tau = sum( n_i * (7.1 - pi)^I_i * J_i * (tau - 1.222)^(J_i - 1) )

    Returns:
        (gamma, gamma_pi, gamma_tau)
    """
    I, J, n = REGION1.I, REGION1.J, REGION1.n
    pi = p / REGION1.p_star
    tau = REGION1.x_star / T

    a = 7.1 - pi
    b = tau - 1.222

    g = np.sum(n * a ** I * b ** J)
    gp = np.sum(-n * I * a ** (I - 1) * b ** J)
    gt = np.sum(n * a ** I * J * b ** (J - 1))

    return float(g), float(gp), float(gt)


def region1_pt(p, T):
    """
    Liquid density and enthalpy from pressure and temperature.

    Parameters:
        p: pressure in Pa
        T: temperature in K

    Returns:
        (rho [kg/m3], h [J/kg])
    """
    pi = p / REGION1.p_star
    tau = REGION1.x_star / T
    _, gp, gt = gamma_region1(p, T)

    v = pi * gp * R_WATER * T / p
    h = tau * gt * R_WATER * T
    return 1 / v, h


def region1_t_ph(p, h):
    """
    Liquid temperature from pressure and enthalpy (Eq. 11), no iteration.
    Only meaningful once the state is known to lie in Region 1.

    Parameters:
        p: pressure in Pa
        h: specific enthalpy in J/kg

    Returns:
        temperature in K
    """
    I, J, n = REGION1_TPH.I, REGION1_TPH.J, REGION1_TPH.n
    pi = p / REGION1_TPH.p_star
    eta = h / REGION1_TPH.x_star
    return float(np.sum(n * pi ** I * (eta + 1) ** J))
