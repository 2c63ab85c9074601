# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""User interface for Makima"""

import argparse
import logging
import sys

import numpy as np

import yaml

import makima
from makima.exceptions import InvalidInputError, OutOfDomainError
from makima.interpolant import Makima
import makima.samples as samples_mod


LEVELS = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]

LOG = logging.getLogger('makima.user_interface')


def main(argv):
    """CLI for Makima"""
    parser = create_parser()

    args = parser.parse_args(argv)
    if args.version:
        print(get_version())
        parser.exit()
    if args.task is None:
        parser.print_help()
        parser.exit()

    set_up_logging(args.logfile, args.verbosity)

    try:
        with args.samples as sample_file:
            x, y = samples_mod.read_samples(sample_file)
        interpolant = Makima.from_arrays(x, y)
        del x, y
        if args.task == 'evaluate':
            evaluate(interpolant, args)
        elif args.task == 'describe':
            describe(interpolant, args)
        else:
            raise AssertionError(f'Bad task {args.task}')
    except (ValueError, OutOfDomainError) as error:
        LOG.error('%s', error)
        return 1
    return 0


def create_parser():
    """Create makima command-line parser and subparsers"""
    parser = argparse.ArgumentParser(
        description='Modified Akima piecewise-cubic interpolation'
    )
    parser.add_argument(
        '--version', help='Print version string and exit', action='store_true'
    )

    subparsers = parser.add_subparsers(help='sub-command help', dest='task')
    evaluate_parser = subparsers.add_parser(
        'evaluate', help='Evaluate interpolant of sample data'
    )
    add_evaluate_args(evaluate_parser)
    add_shared_args(evaluate_parser)
    del evaluate_parser

    describe_parser = subparsers.add_parser(
        'describe', help='List sample nodes with estimated slopes'
    )
    add_describe_args(describe_parser)
    add_shared_args(describe_parser)
    del describe_parser

    return parser


def set_up_logging(logfile, verbosity):
    """Configure logging for makima"""
    loglevel, is_clipped = get_verbosity(verbosity)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(stream=logfile, level=loglevel)
    if is_clipped:
        LOG.warning('maximum verbosity exceeded, ignoring flag')


def get_verbosity(level_index):
    """Get logging level for an integer level_index (count of -v flags)

    0: ERROR, 1: WARNING, 2: INFO, 3: DEBUG.  Returns the level and a flag for
    whether level_index was higher than the maximum.

    """
    if level_index >= len(LEVELS):
        return LEVELS[-1], True
    return LEVELS[level_index], False


def get_version():
    """Get project version"""
    return makima.__version__


def evaluate(interpolant, args):
    """Write interpolated values or derivatives as delimited text"""
    if args.n_points is not None:
        if args.n_points < 1:
            raise InvalidInputError(
                f'Number of points must be positive, got {args.n_points}',
                check='count',
            )
        x = np.linspace(*interpolant.domain(), args.n_points)
    else:
        x = np.array(args.x, dtype=float)
    der = 1 if args.derivative else 0
    LOG.info('evaluating %s at %s points', 'dy/dx' if der else 'y', len(x))
    values = interpolant(x, der=der)
    args.output.write('x, {}\n'.format('dy/dx' if der else 'y'))
    for xv, value in zip(x.tolist(), values.tolist()):
        args.output.write(f'{xv}, {value}\n')


def describe(interpolant, args):
    """Write nodes and estimated slopes"""
    if args.yaml:
        yaml.dump(interpolant.describe_nodes(), args.output, sort_keys=False)
    else:
        args.output.write(f'{interpolant}\n')


def add_shared_args(parser):
    """Add arguments shared across subparsers"""
    parser.add_argument(
        'samples',
        metavar='SAMPLES',
        type=argparse.FileType('rt', encoding='utf-8-sig'),
        help='Delimited text file of x, y samples with header row',
    )
    parser.add_argument(
        '-o',
        '--output',
        type=argparse.FileType('wt'),
        default=sys.stdout,
        help='Output file, default stdout',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        dest='verbosity',
        action='count',
        default=0,
        help='Write more messages about what is being done',
    )
    parser.add_argument(
        '--logfile',
        metavar='FILE',
        type=argparse.FileType('wt'),
        default=sys.stderr,
        help='File to write status messages, default stderr',
    )


def add_evaluate_args(parser):
    """Add arguments for makima evaluate parser"""
    points_group = parser.add_mutually_exclusive_group(required=True)
    points_group.add_argument(
        '-x', nargs='+', type=float, metavar='X', help='Abscissas to evaluate at'
    )
    points_group.add_argument(
        '-n',
        '--n-points',
        metavar='N',
        type=int,
        help='Evaluate at N evenly spaced points spanning the samples',
    )
    parser.add_argument(
        '-d',
        '--derivative',
        action='store_true',
        help='Evaluate first derivative instead of value',
    )


def add_describe_args(parser):
    """Add arguments for makima describe parser"""
    parser.add_argument(
        '--yaml', action='store_true', help='Write nodes as a YAML document'
    )
