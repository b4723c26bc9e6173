"""
IAPWS-IF97 water and steam formulation, Regions 1, 2 and 4.

Provides region1_pt, region1_t_ph, region2_pt, region2_t_ph, tsat_p, psat_t,
the Region 2/3 boundary (b23_p_t, b23_t_p), region boundary checks, and the
IF97Error hierarchy.

Region 3 (dense supercritical fluid) and Region 5 (high temperature steam)
are not implemented.
"""

from .errors import (IF97Error, NegativePressure, UnsupportedRegion3Liquid, UnsupportedRegion3Vapor,
                     SaturationCurveExceeded, SaturationCurveDomainError, RootFindingDivergence)
from .region1 import gamma_region1, region1_pt, region1_t_ph
from .region2 import gamma_region2, region2_pt, region2_t_ph
from .region4 import tsat_p, psat_t
from .boundaries import b23_p_t, b23_t_p, check_pressure, check_liquid, check_vapor, check_two_phase
