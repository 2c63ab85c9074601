# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Test for valid version string"""

import pathlib

import makima


def test_version_matches_file():
    """Test that package version matches version string in VERSION.txt"""
    version_file = pathlib.Path(__file__).parents[1] / 'VERSION.txt'

    if version_file.exists():
        expected = version_file.read_text().strip()
        assert makima.__version__ == expected, 'Version matches file'
    else:
        # Running from installed package
        assert makima.__version__ != 'unknown'
