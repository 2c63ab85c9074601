# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Akima-family slope estimation at interpolation nodes"""

import logging

import numpy as np


LOG = logging.getLogger('makima.slopes')


def secant_slopes(x, y):
    """Slopes of the straight lines joining adjacent samples

    Returns an array of length len(x) - 1.

    """
    return np.diff(y) / np.diff(x)


def extend_secants(m):
    """Append two extrapolated secant slopes at each end of m

    Uses Akima's quadratic extrapolation,

      m_{-1} = 2 m_0 - m_1,  m_{-2} = 2 m_{-1} - m_0

    and symmetrically on the right.  A single secant is repeated, so data with two
    points give a straight line.

    """
    if len(m) == 1:
        return np.full(5, m[0])
    left_1 = 2 * m[0] - m[1]
    left_2 = 2 * left_1 - m[0]
    right_1 = 2 * m[-1] - m[-2]
    right_2 = 2 * right_1 - m[-1]
    return np.concatenate(([left_2, left_1], m, [right_1, right_2]))


def estimate_slopes(x, y):
    """Estimate the derivative at each node of validated samples (x, y)

    At node i, with secant slopes m_{i-2}, m_{i-1}, m_i and m_{i+1} around it,

      s_i = (|m_{i+1} - m_i| m_{i-1} + |m_{i-1} - m_{i-2}| m_i)
            / (|m_{i+1} - m_i| + |m_{i-1} - m_{i-2}|)

    so the central secant on the more stable side dominates.  Where the weight in
    the denominator vanishes, s_i is the mean of m_{i-1} and m_i.  The two nodes
    nearest each end use secants extrapolated by extend_secants.

    """
    m = extend_secants(secant_slopes(x, y))
    # m[k] holds m_{k-2}; node i sees m[i] .. m[i + 3]
    m_before = m[1:-2]
    m_after = m[2:-1]
    w_after = np.abs(m[3:] - m_after)
    w_before = np.abs(m_before - m[:-3])
    weight = w_after + w_before
    with np.errstate(divide='ignore', invalid='ignore'):
        blended = (w_after * m_before + w_before * m_after) / weight
    is_degenerate = ~(weight > 0)
    if is_degenerate.any():
        LOG.debug(
            'zero slope weight at %s of %s nodes, using mean secant',
            is_degenerate.sum(),
            len(x),
        )
    return np.where(is_degenerate, 0.5 * (m_before + m_after), blended)
