#!/usr/bin/python3

"""Installation script for makima

"""

import glob
import os.path
import re

from setuptools import setup


SCRIPTS = glob.glob('bin/*[!~]')


def get_version():
    """Get project version

    """
    version_file_path = os.path.join(
        os.path.dirname(__file__),
        'src',
        'makima',
        'VERSION.txt')
    with open(version_file_path) as version_file:
        version_string = version_file.read().strip()
    version_string_re = re.compile('[0-9.]+')
    match = version_string_re.match(version_string)
    if match is None:
        raise ValueError(
            'version string "{}" does not match regexp "{}"'
            .format(version_string, version_string_re.pattern))
    return match.group(0)


setup(name='makima',
      version=get_version(),
      description='Modified Akima piecewise-cubic interpolation',
      author='Alex Cobb',
      author_email='alex.cobb@smart.mit.edu',
      license='BSD-2-Clause',
      python_requires='>=3.8',
      package_dir={'': 'src'},
      packages=['makima',
                'makima.test'],
      package_data={'makima': ['VERSION.txt'],
                    'makima.test': ['sample_data/*.txt']},
      install_requires=['numpy', 'PyYAML'],
      extras_require={'test': ['pytest', 'scipy']},
      scripts=SCRIPTS)
