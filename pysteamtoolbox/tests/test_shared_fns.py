#!/usr/bin/env python3
"""
Validation tests for shared_fns and validate modules.
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pysteamtoolbox.shared_fns import bisect_solve
from pysteamtoolbox.validate import validate_methods
from pysteamtoolbox.classes import solve_method

def _cubic_err(args, x):
    return x ** 3 - args

def test_bisect_solve_cube_root():
    x = bisect_solve(27.0, _cubic_err, 0.0, 10.0, 1e-10)
    assert abs(x - 3.0) < 1e-9

def test_bisect_solve_exact_bound():
    assert bisect_solve(8.0, _cubic_err, 2.0, 5.0, 1e-10) == 2.0

def test_bisect_solve_not_bracketed():
    try:
        bisect_solve(-8.0, _cubic_err, 0.0, 10.0, 1e-10)
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_bisect_solve_iteration_cap():
    try:
        bisect_solve(27.0, _cubic_err, 0.0, 10.0, 1e-10, maxiter=5)
        assert False, "Should have raised RuntimeError"
    except RuntimeError:
        pass

def test_bisect_solve_uses_every_iteration():
    """Halving [0, 4] down to 2**-10 takes exactly 12 iterations, so maxiter=12 is enough"""
    x = bisect_solve(26.0, _cubic_err, 0.0, 4.0, 2 ** -10, maxiter=12)
    assert abs(x - 26.0 ** (1 / 3)) < 2 ** -10
    try:
        bisect_solve(26.0, _cubic_err, 0.0, 4.0, 2 ** -10, maxiter=11)
        assert False, "Should have raised RuntimeError"
    except RuntimeError:
        pass

def test_validate_methods_strings():
    assert validate_methods(['solvemethod'], ['newton']) == solve_method.NEWTON
    assert validate_methods(['solvemethod'], [solve_method.BISECT]) == solve_method.BISECT
    a, b = validate_methods(['solvemethod', 'solvemethod'], ['Brentq', 'bisect'])
    assert a == solve_method.BRENTQ
    assert b == solve_method.BISECT

def test_validate_methods_unknown():
    try:
        validate_methods(['solvemethod'], ['GOLDEN'])
        assert False, "Should have raised ValueError"
    except ValueError:
        pass


if __name__ == '__main__':
    tests = [v for k, v in globals().items() if k.startswith('test_')]
    failed = 0
    for test in tests:
        try:
            test()
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")
    sys.exit(1 if failed > 0 else 0)
