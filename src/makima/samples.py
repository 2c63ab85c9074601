# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Read interpolation samples from delimited text"""

import csv as csv_mod
import logging

import numpy as np


LOG = logging.getLogger('makima.samples')


def read_samples(sample_file):
    """Read (x, y) samples from an open text file

    Format: a header row whose first field starts with 'x', then one comma-delimited
    x, y pair per row.  Blank rows are skipped.  Returns arrays (x, y).

    """
    sample_csv = csv_mod.reader(sample_file, delimiter=',')
    header = next(sample_csv, None)
    if header is None or not header[0].strip().lower().startswith('x'):
        raise ValueError(f'Expected header row starting with "x", got {header}')
    x = []
    y = []
    for row in sample_csv:
        if not any(field.strip() for field in row):
            continue
        if len(row) != 2:
            raise ValueError(
                f'Line {sample_csv.line_num}: expected 2 fields, got {len(row)}'
            )
        try:
            xv, yv = (float(field) for field in row)
        except ValueError as error:
            raise ValueError(f'Line {sample_csv.line_num}: {error}') from error
        x.append(xv)
        y.append(yv)
    LOG.info('%s samples read from %s', len(x), getattr(sample_file, 'name', '?'))
    return (np.array(x, dtype=float), np.array(y, dtype=float))
