"""
IAPWS-IF97 Region 2: Superheated vapor properties.

Provides:
    - gamma_region2(p, T): dimensionless Gibbs free energy (ideal + residual) and derivatives
    - region2_pt(p, T): density in kg/m3 and specific enthalpy in J/kg
    - region2_t_ph(p, h): temperature in K by numerical inversion of region2_pt

Valid range (Region 2):
    273.15 K <= T <= 623.15 K  for  0 < p <= p_sat(T)
    623.15 K <  T <= 863.15 K  for  0 < p <= p_B23(T)
    863.15 K <  T <= 1073.15 K for  0 < p <= 100 MPa

Units: p in Pa, T in K, h in J/kg
"""

import logging

import numpy as np
from scipy.optimize import brentq, newton

from pysteamtoolbox.classes import solve_method
from pysteamtoolbox.constants import R_WATER, T_R2_MAX, SOLVER_TOL, SOLVER_MAXITER, T_GUESS
from pysteamtoolbox.if97.coefficients import REGION2_IDEAL, REGION2_RESIDUAL
from pysteamtoolbox.if97.errors import RootFindingDivergence
from pysteamtoolbox.if97.region4 import tsat_p
from pysteamtoolbox.shared_fns import bisect_solve
from pysteamtoolbox.validate import validate_methods

logger = logging.getLogger(__name__)


def gamma_region2(p, T):
    """
    gamma0    = ln(pi) + sum( n0_i * tau^J0_i )
    gammar    = sum( n_i * pi^I_i * (tau - 0.5)^J_i )
    gamma_pi  = 1/pi + sum( n_i * I_i * pi^(I_i - 1) * (tau - 0.5)^J_i )
    gamma_tau = sum( n0_i * J0_i * tau^(J0_i - 1) ) + sum( n_i * pi^I_i * J_i * (tau - 0.5)^(J_i - 1) )

    Returns:
        (gamma, gamma_pi, gamma_tau)
    """
    J0, n0 = REGION2_IDEAL.J, REGION2_IDEAL.n
    I, J, n = REGION2_RESIDUAL.I, REGION2_RESIDUAL.J, REGION2_RESIDUAL.n
    pi = p / REGION2_RESIDUAL.p_star
    tau = REGION2_RESIDUAL.x_star / T
    b = tau - 0.5

    g0 = np.log(pi) + np.sum(n0 * tau ** J0)
    gr = np.sum(n * pi ** I * b ** J)

    gp = 1 / pi + np.sum(n * I * pi ** (I - 1) * b ** J)
    gt = np.sum(n0 * J0 * tau ** (J0 - 1)) + np.sum(n * pi ** I * J * b ** (J - 1))

    return float(g0 + gr), float(gp), float(gt)


def region2_pt(p, T):
    """
    Vapor density and enthalpy from pressure and temperature.

    Parameters:
        p: pressure in Pa
        T: temperature in K

    Returns:
        (rho [kg/m3], h [J/kg])
    """
    pi = p / REGION2_RESIDUAL.p_star
    tau = REGION2_RESIDUAL.x_star / T
    _, gp, gt = gamma_region2(p, T)

    v = pi * gp * R_WATER * T / p
    h = tau * gt * R_WATER * T
    return 1 / v, h


def _h_err(args, T):
    p, h = args
    return region2_pt(p, T)[1] - h


def region2_t_ph(
    p: float,
    h: float,
    t_lo: float = None,
    t_hi: float = T_R2_MAX,
    method: solve_method = solve_method.BRENTQ,
    tol: float = SOLVER_TOL,
    maxiter: int = SOLVER_MAXITER,
    t_guess: float = T_GUESS,
) -> float:
    """ Returns vapor temperature (K) that reproduces enthalpy h at pressure p.
        Region 2 has no backward equation used here, so region2_pt is inverted numerically.
        p: Pressure (Pa)
        h: Specific enthalpy (J/kg)
        t_lo: Lower temperature bracket (K). Defaults to saturation temperature at p
        t_hi: Upper temperature bracket (K). Defaults to the Region 2 limit, 1073.15 K
        method: Solver used for the inversion
                'BRENTQ' Brent's method on [t_lo, t_hi] (Default)
                'NEWTON' Secant iteration from t_guess
                'BISECT' Plain bisection on [t_lo, t_hi]
        tol: Absolute temperature tolerance (K)
        maxiter: Iteration cap. Exceeding it raises RootFindingDivergence
        t_guess: Starting temperature for 'NEWTON' (K)
    """
    method = validate_methods(["solvemethod"], [method])
    if t_lo is None:
        t_lo = tsat_p(p)
    args = (p, h)

    try:
        if method == solve_method.BRENTQ:
            T, res = brentq(lambda t: _h_err(args, t), t_lo, t_hi, xtol=tol, maxiter=maxiter,
                            full_output=True, disp=False)
            converged = res.converged
            niter = res.iterations
        elif method == solve_method.NEWTON:
            T, res = newton(lambda t: _h_err(args, t), t_guess, tol=tol, maxiter=maxiter,
                            full_output=True, disp=False)
            converged = res.converged
            niter = res.iterations
        else:
            T = bisect_solve(args, _h_err, t_lo, t_hi, tol, maxiter)
            converged = True
            niter = None
    except (ValueError, RuntimeError, ZeroDivisionError) as e:
        raise RootFindingDivergence(f"Region 2 inversion failed for p = {p} Pa, h = {h} J/kg: {e}") from e

    T = float(T)
    if not converged or not np.isfinite(T) or T <= 0:
        raise RootFindingDivergence(
            f"Region 2 inversion did not converge within {maxiter} iterations for p = {p} Pa, h = {h} J/kg"
        )
    logger.debug("region2_t_ph: p=%s, h=%s -> T=%.6f K (%s, iterations=%s)", p, h, T, method.name, niter)
    return T
