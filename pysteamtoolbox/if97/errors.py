"""
Errors raised when a (pressure, enthalpy) query falls outside the domain
covered by the implemented IAPWS-IF97 regions.

All derive from IF97Error, itself a ValueError, so callers that already
guard bad inputs with `except ValueError` keep working.
"""


class IF97Error(ValueError):
    """Base class for all out-of-bounds property evaluation failures"""


class NegativePressure(IF97Error):
    """Pressure below zero"""


class UnsupportedRegion3Liquid(IF97Error):
    """Liquid-side state lies in Region 3, which is not implemented"""


class UnsupportedRegion3Vapor(IF97Error):
    """Vapor-side state lies below the B23 boundary, inside Region 3"""


class SaturationCurveExceeded(IF97Error):
    """Two-phase state requested above the critical temperature"""


class SaturationCurveDomainError(IF97Error):
    """Saturation correlation has no real solution at this pressure"""


class RootFindingDivergence(IF97Error):
    """Region 2 temperature inversion failed to converge"""
