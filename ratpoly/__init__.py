"""RatPoly is a Python package for exact arithmetic with rational polynomials.

RatPoly provides immutable single-variable polynomials with rational
coefficients, kept in a canonical sparse form: terms sorted by descending
exponent, no duplicate exponents, and no zero coefficients.

Polynomials support negation, addition, subtraction, multiplication, and
truncating division, as well as differentiation, antidifferentiation,
definite integration, and numeric evaluation (also for NumPy arrays of
sample points). A canonical string form is available with a matching parser.

Undefined results, such as division by the zero polynomial, are represented
by a distinguished NaN value that propagates through all operations.

The above operations are all available via Python's operator overloading.
The coefficients are exact rationals of type RatNum (backed by gmpy2), and
the terms of a polynomial are of type RatTerm.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments passed to RatPoly."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('RatPoly help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print RatPoly version number and exit')
    group.add_argument('-H', '--HELP', action='store_true',
                       help='print this help message for RatPoly and exit')

    group = parser.add_argument_group('RatPoly parameters')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--check-rep', action='store_true',
                       help='check representation invariant of every new polynomial')

    parser.set_defaults(log_level='info')
    return parser


def log_level(name):
    """Return logging level for given name, such as 'debug', 'd', or '1'.

    Only the first character of name counts. Unknown names give logging.NOTSET.
    """
    ch = name[:1].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    if not '0' <= ch <= '5':
        ch = '0'
    return (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
            logging.CRITICAL)[int(ch)]


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]
    if options.VERSION or options.HELP:
        options.no_log = True

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        level = logging.DEBUG if sys.flags.dev_mode else log_level(options.log_level)
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del level

    # Enable representation checks in ratpoly.polynomials, if demanded.
    env_check_rep = os.getenv('RATPOLY_CHECKREP') == '1'  # check if variable RATPOLY_CHECKREP is set
    if options.check_rep or sys.flags.dev_mode:
        if not env_check_rep:
            os.environ['RATPOLY_CHECKREP'] = '1'  # NB: RATPOLY_CHECKREP also set for subprocesses
    logging.debug(f'Representation checks {"on" if os.getenv("RATPOLY_CHECKREP") == "1" else "off"}')

    del options, env_check_rep
