"""
IAPWS-IF97 coefficient tables.

Each correlation is stored as read-only numpy arrays of exponents (I_i, J_i)
and coefficients n_i, together with the reference scalings that reduce
pressure and temperature (or enthalpy) for that correlation. Tables are
built once at import and are safe to share between threads.

Reference:
    Wagner, W. et al. (2000). "The IAPWS Industrial Formulation 1997
    for the Thermodynamic Properties of Water and Steam."
    ASME J. Eng. Gas Turbines Power, 122(1), 150-182.
"""

from typing import NamedTuple

import numpy as np

from pysteamtoolbox.constants import (P_STAR_R1, T_STAR_R1, P_STAR_R1_BACK, H_STAR_R1_BACK,
                                      P_STAR_R2, T_STAR_R2)


class CoefficientTable(NamedTuple):
    I: np.ndarray       # Exponents on reduced pressure
    J: np.ndarray       # Exponents on reduced temperature (or enthalpy)
    n: np.ndarray       # Coefficients
    p_star: float       # Reference pressure (Pa)
    x_star: float       # Reference temperature (K) or enthalpy (J/kg)


def _frozen(values, dtype):
    arr = np.array(values, dtype=dtype)
    arr.setflags(write=False)
    return arr


def _make_table(rows, p_star, x_star):
    """ Build a CoefficientTable from (I, J, n) rows """
    I, J, n = zip(*rows)
    if not len(I) == len(J) == len(n):
        raise ValueError("Coefficient table columns differ in length")
    return CoefficientTable(_frozen(I, int), _frozen(J, int), _frozen(n, float), p_star, x_star)


# Region 1 Gibbs free energy (Table 2), gamma(pi, tau)
_REGION1_IJN = [
    (0,  -2,   0.14632971213167e+00),
    (0,  -1,  -0.84548187169114e+00),
    (0,   0,  -0.37563603672040e+01),
    (0,   1,   0.33855169168385e+01),
    (0,   2,  -0.95791963387872e+00),
    (0,   3,   0.15772038513228e+00),
    (0,   4,  -0.16616417199501e-01),
    (0,   5,   0.81214629983568e-03),
    (1,  -9,   0.28319080123804e-03),
    (1,  -7,  -0.60706301565874e-03),
    (1,  -1,  -0.18990068218419e-01),
    (1,   0,  -0.32529748770505e-01),
    (1,   1,  -0.21841717175414e-01),
    (1,   3,  -0.52838357969930e-04),
    (2,  -3,  -0.47184321073267e-03),
    (2,   0,  -0.30001780793026e-03),
    (2,   1,   0.47661393906987e-04),
    (2,   3,  -0.44141845330846e-05),
    (2,  17,  -0.72694996297594e-15),
    (3,  -4,  -0.31679644845054e-04),
    (3,   0,  -0.28270797985312e-05),
    (3,   6,  -0.85205128120103e-09),
    (4,  -5,  -0.22425281908000e-05),
    (4,  -2,  -0.65171222895601e-06),
    (4,  10,  -0.14341729937924e-12),
    (5,  -8,  -0.40516996860117e-06),
    (8, -11,  -0.12734301741641e-08),
    (8,  -6,  -0.17424871230634e-09),
    (21, -29, -0.68762131295531e-18),
    (23, -31,  0.14478307828521e-19),
    (29, -38,  0.26335781662795e-22),
    (30, -39, -0.11947622640071e-22),
    (31, -40,  0.18228094581404e-23),
    (32, -41, -0.93537087292458e-25),
]

# Region 1 backward equation T(p, h) (Table 6), theta(pi, eta)
_REGION1_TPH_IJN = [
    (0,   0,  -0.23872489924521e+03),
    (0,   1,   0.40421188637945e+03),
    (0,   2,   0.11349746881718e+03),
    (0,   6,  -0.58457616048039e+01),
    (0,  22,  -0.15285482413140e-03),
    (0,  32,  -0.10866707695377e-05),
    (1,   0,  -0.13391744872602e+02),
    (1,   1,   0.43211039183559e+02),
    (1,   2,  -0.54010067170506e+02),
    (1,   3,   0.30535892203916e+02),
    (1,   4,  -0.65964749423638e+01),
    (1,  10,   0.93965400878363e-02),
    (1,  32,   0.11573647505340e-06),
    (2,  10,  -0.25858641282073e-04),
    (2,  32,  -0.40644363084799e-08),
    (3,  10,   0.66456186191635e-07),
    (3,  32,   0.80670734103027e-10),
    (4,  32,  -0.93477771213947e-12),
    (5,  32,   0.58265442020601e-14),
    (6,  32,  -0.15020185953503e-16),
]

# Region 2 ideal-gas part gamma0 (Table 10). No pressure exponent, I is zero.
_REGION2_IDEAL_IJN = [
    (0,   0,  -0.96927686500217e+01),
    (0,   1,   0.10086655968018e+02),
    (0,  -5,  -0.56087911283020e-02),
    (0,  -4,   0.71452738081455e-01),
    (0,  -3,  -0.40710498223928e+00),
    (0,  -2,   0.14240819171444e+01),
    (0,  -1,  -0.43839511319450e+01),
    (0,   2,  -0.28408632460772e+00),
    (0,   3,   0.21268463753307e-01),
]

# Region 2 residual part gammar (Table 11)
_REGION2_RESIDUAL_IJN = [
    (1,   0,  -0.17731742473213e-02),
    (1,   1,  -0.17834862292358e-01),
    (1,   2,  -0.45996013696365e-01),
    (1,   3,  -0.57581259083432e-01),
    (1,   6,  -0.50325278727930e-01),
    (2,   1,  -0.33032641670203e-04),
    (2,   2,  -0.18948987516315e-03),
    (2,   4,  -0.39392777243355e-02),
    (2,   7,  -0.43797295650573e-01),
    (2,  36,  -0.26674547914087e-04),
    (3,   0,   0.20481737692309e-07),
    (3,   1,   0.43870667284435e-06),
    (3,   3,  -0.32277677238570e-04),
    (3,   6,  -0.15033924542148e-02),
    (3,  35,  -0.40668253562649e-01),
    (4,   1,  -0.78847309559367e-09),
    (4,   2,   0.12790717852285e-07),
    (4,   3,   0.48225372718507e-06),
    (5,   7,   0.22922076337661e-05),
    (6,   3,  -0.16714766451061e-10),
    (6,  16,  -0.21171472321355e-02),
    (6,  35,  -0.23895741934104e+02),
    (7,   0,  -0.59059564324270e-17),
    (7,  11,  -0.12621808899101e-05),
    (7,  25,  -0.38946842435739e-01),
    (8,   8,   0.11256211360459e-10),
    (8,  36,  -0.82311340897998e+01),
    (9,  13,   0.19809712802088e-07),
    (10,  4,   0.10406965210174e-18),
    (10, 10,  -0.10234747095929e-12),
    (10, 14,  -0.10018179379511e-08),
    (16, 29,  -0.80882908646985e-10),
    (16, 50,   0.10693031879409e+00),
    (18, 57,  -0.33662250574171e+00),
    (20, 20,   0.89185845355421e-24),
    (20, 35,   0.30629316876232e-12),
    (20, 48,  -0.42002467698208e-05),
    (21, 21,  -0.59056029685639e-25),
    (22, 53,   0.37826947613457e-05),
    (23, 39,  -0.12768608934681e-14),
    (24, 26,   0.73087610595061e-28),
    (24, 40,   0.55414715350778e-16),
    (24, 58,  -0.94369707241210e-06),
]

REGION1 = _make_table(_REGION1_IJN, P_STAR_R1, T_STAR_R1)
REGION1_TPH = _make_table(_REGION1_TPH_IJN, P_STAR_R1_BACK, H_STAR_R1_BACK)
REGION2_IDEAL = _make_table(_REGION2_IDEAL_IJN, P_STAR_R2, T_STAR_R2)
REGION2_RESIDUAL = _make_table(_REGION2_RESIDUAL_IJN, P_STAR_R2, T_STAR_R2)

# Saturation curve n1..n10 (Table 34), stored zero-based
N_REGION4 = _frozen([
     0.11670521452767e+04, -0.72421316703206e+06, -0.17073846940092e+02,
     0.12020824702470e+05, -0.32325550322333e+07,  0.14915108613530e+02,
    -0.48232657361591e+04,  0.40511340542057e+06, -0.23855557567849e+00,
     0.65017534844798e+03,
], float)

# Region 2/3 boundary n1..n5 (Table 1), stored zero-based
N_B23 = _frozen([
     0.34805185628969e+03, -0.11671859879975e+01,  0.10192970039326e-02,
     0.57254459862746e+03,  0.13918839778870e+02,
], float)
