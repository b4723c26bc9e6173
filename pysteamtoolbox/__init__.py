"""
pysteamtoolbox
===================================

-----------------------------------------------
IAPWS-IF97 Water and Steam Property Utilities
-----------------------------------------------

Thermodynamic properties of pure water and steam from pressure and specific enthalpy,
following the IAPWS Industrial Formulation 1997. Given (p, h) the state is placed in
Region 1 (subcooled liquid), Region 4 (two-phase mixture) or Region 2 (superheated vapor),
and density, temperature, quality and the bounding saturation properties are returned.

Note: Functions are grouped into modules, requiring seperate imports

Includes functions to perform calculations including;

- Density, temperature and quality from pressure and enthalpy (steam.steam_ph)
- Saturated liquid and vapor properties at a pressure (steam.saturation_state)
- Saturation temperature from pressure, and pressure from temperature (if97.tsat_p, if97.psat_t)
- Region 1 liquid density and enthalpy, and temperature from enthalpy (if97.region1_pt, if97.region1_t_ph)
- Region 2 vapor density and enthalpy, and temperature from enthalpy (if97.region2_pt, if97.region2_t_ph)
- Region 2/3 boundary curve (if97.b23_p_t, if97.b23_t_p)

Region 3 (dense supercritical fluid) is not supported, and queries that land there raise an error.
"""

submodules = [
    'classes',
    'constants',
    'if97',
    'shared_fns',
    'steam',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pysteamtoolbox.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pysteamtoolbox' has no attribute '{name}'"
            )
