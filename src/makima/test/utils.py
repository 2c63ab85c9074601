# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Utilities for tests"""

import numpy as np


def assert_close(a, b, message='', rtol=1e-5, atol=1e-8):
    """Verify that floats in a and b are close"""
    message_template = '{} not close to {}'
    if message:
        message_template = ': '.join((message, message_template))
    assert np.allclose(a, b, rtol=rtol, atol=atol), message_template.format(a, b)


def hermite_basis_form(x0, x1, y0, y1, s0, s1, x):
    """Evaluate cubic Hermite on [x0, x1] using the unfactored basis functions"""
    dx = x1 - x0
    t = (x - x0) / dx
    h00 = 2 * t**3 - 3 * t**2 + 1
    h10 = t**3 - 2 * t**2 + t
    h01 = -2 * t**3 + 3 * t**2
    h11 = t**3 - t**2
    return y0 * h00 + dx * s0 * h10 + y1 * h01 + dx * s1 * h11
