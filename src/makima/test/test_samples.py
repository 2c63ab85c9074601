# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Tests for reading sample files"""

import io

import pytest

import makima.samples as samples_mod
from makima.test import conftest


def test_read_samples():
    """Read quadratic sample file"""
    with open(
        conftest.get_sample_file_path('quadratic'), 'rt', encoding='utf-8-sig'
    ) as sample_file:
        x, y = samples_mod.read_samples(sample_file)
    assert x.tolist() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    assert y.tolist() == [0.0, 1.0, 4.0, 9.0, 16.0, 25.0]


def test_blank_rows_skipped():
    """Blank rows are ignored"""
    x, y = samples_mod.read_samples(io.StringIO('x, y\n0, 1\n\n2, 3\n'))
    assert x.tolist() == [0.0, 2.0]
    assert y.tolist() == [1.0, 3.0]


@pytest.mark.parametrize(
    'text',
    [
        '',
        '0, 1\n2, 3\n',
    ],
)
def test_bad_header(text):
    """Header row is required"""
    with pytest.raises(ValueError):
        samples_mod.read_samples(io.StringIO(text))


@pytest.mark.parametrize(
    'text',
    [
        'x, y\n0, 1\n1, 2, 3\n',
        'x, y\n0, 1\n1\n',
        'x, y\n0, 1\none, 2\n',
    ],
)
def test_bad_row(text):
    """Malformed rows are reported with their line number"""
    with pytest.raises(ValueError) as exception:
        samples_mod.read_samples(io.StringIO(text))
    assert 'Line 3' in str(exception.value)
