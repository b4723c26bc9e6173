#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pySteamToolbox - IAPWS-IF97 Water and Steam Property Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""

def bisect_solve(args, f, xmin, xmax, xtol, maxiter=99):
    """ Bisection solve of f(args, x) = 0 between xmin and xmax.
        Stops once the bracket is narrower than xtol. Raises RuntimeError
        if that has not happened after maxiter halvings, and ValueError if
        the bounds do not bracket a sign change.
    """
    err_hi = f(args, xmax)
    err_lo = f(args, xmin)
    if err_hi == 0:
        return xmax
    if err_lo == 0:
        return xmin
    if err_hi * err_lo > 0:
        raise ValueError(f"Bisection bounds [{xmin}, {xmax}] do not bracket a solution")
    iternum = 0
    mid_val = (xmax + xmin) / 2
    while abs(xmax - xmin) > xtol:
        if iternum >= maxiter:
            raise RuntimeError("Could not solve via bisection")
        mid_val = (xmax + xmin) / 2
        err_mid = f(args, mid_val)
        iternum += 1
        if err_mid == 0:
            break
        if (err_hi * err_mid < 0):  # Solution point must be higher than current mid_val case
            xmin = mid_val
            err_lo = err_mid
        else:
            xmax = mid_val  # Otherwise must be lower than current mid_val case
            err_hi = err_mid
    return mid_val
