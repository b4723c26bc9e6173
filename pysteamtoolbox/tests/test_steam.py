#!/usr/bin/env python3
"""
Validation tests for steam module (pressure-enthalpy dispatcher).
Run from project root: python3 -m pytest pysteamtoolbox/tests/ -v
Or standalone:         python3 pysteamtoolbox/tests/test_steam.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pysteamtoolbox.steam as steam
import pysteamtoolbox.if97 as if97
from pysteamtoolbox.classes import region, solve_method
from pysteamtoolbox.constants import TC

MPa = 1e6
kJ = 1e3

# =============================================================================
# Saturation state
# =============================================================================

def test_saturation_state_1mpa():
    """Saturated liquid and vapor at 1 MPa bracket the steam tables values"""
    sat = steam.saturation_state(1 * MPa)
    assert abs(sat.Ts - 453.035632) < 1e-5
    assert 760 < sat.hl / kJ < 765, f"hl = {sat.hl / kJ} kJ/kg"
    assert 2775 < sat.hg / kJ < 2780, f"hg = {sat.hg / kJ} kJ/kg"
    assert 885 < sat.rhol < 890, f"rhol = {sat.rhol}"
    assert 5.1 < sat.rhog < 5.2, f"rhog = {sat.rhog}"

def test_saturation_state_matches_regions():
    p = 5 * MPa
    sat = steam.saturation_state(p)
    assert (sat.rhol, sat.hl) == if97.region1_pt(p, sat.Ts)
    assert (sat.rhog, sat.hg) == if97.region2_pt(p, sat.Ts)

# =============================================================================
# Subcooled liquid
# =============================================================================

def test_subcooled_liquid():
    """p = 10 MPa, h = 1000 kJ/kg is compressed liquid near 505 K"""
    p, h = 10 * MPa, 1000 * kJ
    res, reg = steam.steam_ph_region(p, h)
    assert reg == region.LIQUID
    assert res.x == 0
    assert 500 < res.T < 510, f"T = {res.T}"
    rho, h_fwd = if97.region1_pt(p, res.T)
    assert res.rho == rho
    assert abs(h_fwd - h) / h < 5e-4, f"Forward enthalpy {h_fwd} does not reproduce {h}"
    assert res.T == if97.region1_t_ph(p, h)

def test_subcooled_backward_verification_point():
    """Dispatcher returns the published Region 1 backward temperature"""
    res, reg = steam.steam_ph_region(3 * MPa, 500 * kJ)
    assert reg == region.LIQUID
    assert abs(res.T - 391.798509) < 1e-5

def test_result_unpacks_in_order():
    """Result is the seven field tuple (rho, T, x, rhol, rhog, hl, hg)"""
    res = steam.steam_ph(1 * MPa, 500 * kJ)
    assert len(res) == 7
    rho, T, x, rhol, rhog, hl, hg = res
    sat = steam.saturation_state(1 * MPa)
    assert (rhol, rhog, hl, hg) == (sat.rhol, sat.rhog, sat.hl, sat.hg)
    assert (rho, T, x) == (res.rho, res.T, 0)

def test_region_reported_separately():
    """steam_ph_region returns the same result as steam_ph, with the region it resolved"""
    for h, expected in [(500 * kJ, region.LIQUID), (1500 * kJ, region.TWO_PHASE), (3500 * kJ, region.VAPOR)]:
        res, reg = steam.steam_ph_region(1 * MPa, h)
        assert reg == expected
        assert res == steam.steam_ph(1 * MPa, h)

# =============================================================================
# Superheated vapor
# =============================================================================

def test_superheated_vapor():
    """p = 10 MPa, h = 3000 kJ/kg is superheated steam near 645 K"""
    p, h = 10 * MPa, 3000 * kJ
    res, reg = steam.steam_ph_region(p, h)
    assert reg == region.VAPOR
    assert res.x == 1
    assert 630 < res.T < 660, f"T = {res.T}"
    rho, h_fwd = if97.region2_pt(p, res.T)
    assert res.rho == rho
    assert abs(h_fwd - h) / h < 1e-9

def test_superheated_verification_point():
    """Enthalpy of the published Region 2 point (0.0035 MPa, 700 K) returns 700 K"""
    p = 0.0035 * MPa
    _, h = if97.region2_pt(p, 700.0)
    res, reg = steam.steam_ph_region(p, h)
    assert reg == region.VAPOR
    assert abs(res.T - 700.0) < 1e-6
    assert abs(1 / res.rho - 0.923015898e2) / 0.923015898e2 < 1e-8

def test_superheated_solvers_agree():
    p, h = 10 * MPa, 3000 * kJ
    T_ref = steam.steam_ph(p, h).T
    for solver in [solve_method.NEWTON, 'newton', 'BISECT']:
        T = steam.steam_ph(p, h, solver=solver).T
        assert abs(T - T_ref) < 1e-6, f"{solver}: {T} vs {T_ref}"

def test_superheated_above_b23():
    """Vapor at 20 MPa and 750 K is above the B23 curve and accepted"""
    p = 20 * MPa
    _, h = if97.region2_pt(p, 750.0)
    res, reg = steam.steam_ph_region(p, h)
    assert reg == region.VAPOR
    assert abs(res.T - 750.0) < 1e-6

def test_superheated_out_of_range():
    """Enthalpy past the Region 2 temperature limit cannot be inverted"""
    try:
        steam.steam_ph(1 * MPa, 10000 * kJ)
        assert False, "Should have raised RootFindingDivergence"
    except if97.RootFindingDivergence:
        pass

# =============================================================================
# Two-phase
# =============================================================================

def test_two_phase_quality():
    """Quality is the lever rule between hl and hg, temperature is Ts"""
    p = 1 * MPa
    sat = steam.saturation_state(p)
    for frac in [0.1, 0.3, 0.5, 0.9]:
        h = sat.hl + frac * (sat.hg - sat.hl)
        res, reg = steam.steam_ph_region(p, h)
        assert reg == region.TWO_PHASE
        assert res.x == (h - sat.hl) / (sat.hg - sat.hl)
        assert 0 < res.x < 1
        assert res.T == sat.Ts

def test_two_phase_density():
    """Mixture density follows 1/(1/rhol + 1/rhog), independent of quality"""
    p = 1 * MPa
    sat = steam.saturation_state(p)
    expected = 1 / (1 / sat.rhol + 1 / sat.rhog)
    for frac in [0.2, 0.8]:
        res = steam.steam_ph(p, sat.hl + frac * (sat.hg - sat.hl))
        assert res.rho == expected

def test_two_phase_endpoints():
    """h exactly at hl or hg resolves to the two-phase branch"""
    p = 2 * MPa
    sat = steam.saturation_state(p)
    assert steam.steam_ph(p, sat.hl).x == 0
    assert steam.steam_ph(p, sat.hg).x == 1
    assert steam.steam_ph_region(p, sat.hl)[1] == region.TWO_PHASE

# =============================================================================
# Out of bounds
# =============================================================================

def test_negative_pressure():
    try:
        steam.steam_ph(-1, 1000 * kJ)
        assert False, "Should have raised NegativePressure"
    except if97.NegativePressure:
        pass

def test_zero_pressure():
    """Saturation curve has no real solution at zero pressure"""
    try:
        steam.steam_ph(0.0, 1000 * kJ)
        assert False, "Should have raised SaturationCurveDomainError"
    except if97.SaturationCurveDomainError:
        pass

def test_liquid_region3():
    """Liquid at 20 MPa has Ts above 623.15 K and lies in Region 3"""
    try:
        steam.steam_ph(20 * MPa, 1000 * kJ)
        assert False, "Should have raised UnsupportedRegion3Liquid"
    except if97.UnsupportedRegion3Liquid:
        pass

def test_vapor_region3():
    """Vapor just above hg at 17 MPa solves below the B23 curve"""
    p = 17 * MPa
    sat = steam.saturation_state(p)
    assert sat.Ts < if97.b23_t_p(p)
    try:
        steam.steam_ph(p, sat.hg + 1 * kJ)
        assert False, "Should have raised UnsupportedRegion3Vapor"
    except if97.UnsupportedRegion3Vapor:
        pass

def test_two_phase_above_critical():
    """Above the critical pressure the two-phase band is rejected"""
    p = 23 * MPa
    sat = steam.saturation_state(p)
    assert sat.Ts > TC
    assert sat.hl < sat.hg
    try:
        steam.steam_ph(p, (sat.hl + sat.hg) / 2)
        assert False, "Should have raised SaturationCurveExceeded"
    except if97.SaturationCurveExceeded:
        pass

def test_bad_solver_name():
    try:
        steam.steam_ph(10 * MPa, 3000 * kJ, solver='SIMPLEX')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

# =============================================================================
# Reporting
# =============================================================================

def test_evaluate_alias():
    assert steam.evaluate(10 * MPa, 3000 * kJ) == steam.steam_ph(10 * MPa, 3000 * kJ)

def test_summary_superheated():
    text = steam.steam_summary(*steam.steam_ph_region(10 * MPa, 3000 * kJ))
    assert "VAPOR" in text
    assert "Superheated steam" in text
    assert "Temperature (K)" in text

def test_summary_liquid():
    text = steam.steam_summary(*steam.steam_ph_region(10 * MPa, 1000 * kJ))
    assert "LIQUID" in text
    assert "Superheated steam" not in text

def test_summary_without_region():
    text = steam.steam_summary(steam.steam_ph(10 * MPa, 3000 * kJ))
    assert "Region" not in text
    assert "Density (kg/m3)" in text


if __name__ == '__main__':
    print("=" * 70)
    print("STEAM MODULE VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
