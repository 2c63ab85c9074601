# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Fixtures for makima tests"""

import os

import numpy as np

import pytest


SAMPLE_DATA_DIR = os.path.join(os.path.dirname(__file__), 'sample_data')


collect_ignore = []  # pylint: disable=invalid-name

for dirpath, dirnames, filenames in os.walk(os.path.dirname(__file__)):
    collect_ignore += [
        os.path.join(dirpath, filename.replace('.py', '_flymake.py'))
        for filename in filenames
        if filename.endswith('.py')
    ]


@pytest.fixture(scope='function')
def irregular_samples():
    """Irregularly spaced samples of a smooth, non-polynomial function"""
    i = np.arange(12, dtype='float64')
    x = i + 0.3 * np.sin(i)
    y = np.sin(x) + 0.1 * x**2
    return x, y


@pytest.fixture(scope='function', params=['step', 'spike'])
def abrupt_samples(request):
    """Samples with abrupt changes in local trend"""
    x = np.arange(10, dtype='float64')
    y = {
        'step': np.where(x < 5, 0.0, 1.0),
        'spike': np.where(x == 4, 3.0, 0.0),
    }[request.param]
    return x, y


def get_sample_file_path(name, suffix='txt'):
    """Return path to a sample file"""
    return os.path.join(SAMPLE_DATA_DIR, f'{name}.{suffix}')
