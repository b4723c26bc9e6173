"""
Water and steam properties from pressure and specific enthalpy.

Provides steam_ph (alias evaluate), steam_ph_region, saturation_state, steam_summary,
and the SaturationState and PropertyResult result types.
"""

from .steam import SaturationState, PropertyResult, saturation_state, steam_ph, steam_ph_region, evaluate, steam_summary
