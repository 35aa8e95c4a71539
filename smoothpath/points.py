import logging
import pathlib
import re

import numpy

from . import util
from .errors import InvalidArgument, MalformedInput

logger = logging.getLogger(__name__)

MIN_POINTS = 3

# optional sign, digits with an optional decimal point, optional exponent
_NUMBER = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)

def as_points(points):
    """Return the input as a float array of shape (n, 2), n >= 3.

    Raises InvalidArgument if the points are not 2D, contain non-finite values,
    or if there are too few of them to make a spline with an interior knot."""
    try:
        points = numpy.array(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgument('Points must be a sequence of (x, y) pairs: {}'.format(e))
    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidArgument('Points must have shape (n, 2), not {}.'.format(points.shape))
    if len(points) < MIN_POINTS:
        raise InvalidArgument('At least {} points are required, got {}.'.format(MIN_POINTS, len(points)))
    if not numpy.isfinite(points).all():
        raise InvalidArgument('Point coordinates must be finite.')
    # the knots are shared by every later stage, so make sure nobody edits them
    points.flags.writeable = False
    return points

def _parse_number(text, token):
    if not _NUMBER.fullmatch(text):
        raise MalformedInput('Could not parse "{}" as a number in point "{}".'.format(text, token))
    value = float(text)
    if not numpy.isfinite(value):
        raise MalformedInput('Point "{}" has a non-finite coordinate.'.format(token))
    return value

def _parse_token(token):
    parts = token.split(',')
    if len(parts) != 2:
        raise MalformedInput('Point "{}" is not of the form x,y.'.format(token))
    return [_parse_number(part, token) for part in parts]

def parse_points(text):
    """Parse a whitespace-delimited sequence of "x,y" tokens.

    Example:
        points = parse_points('50,182 100,166 150,87')

    Returns: array of shape (n, 2)
    Raises MalformedInput if a token is not a pair of numbers or if fewer than
    three points are present."""
    points = [_parse_token(token) for token in text.split()]
    if len(points) < MIN_POINTS:
        raise MalformedInput('At least {} points are required, got {}.'.format(MIN_POINTS, len(points)))
    logger.debug('parsed %d points', len(points))
    return as_points(points)

def read_points(path, delimiter=',', header=False):
    """Read x,y points from a delimited text file, one point per line.

    Blank lines are skipped. If header is True, the first non-blank line is
    ignored.

    Raises MalformedInput (naming the line number) for rows that do not
    contain exactly two numeric values."""
    path = pathlib.Path(path)
    points = []
    with path.open('r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue # skip blank lines
            if header:
                header = False
                continue
            vals = [val.strip() for val in line.split(delimiter)]
            if len(vals) != 2:
                raise MalformedInput('{}:{}: expected 2 values, got {}.'.format(path, line_number, len(vals)))
            try:
                points.append([_parse_number(val, line) for val in vals])
            except MalformedInput as e:
                raise MalformedInput('{}:{}: {}'.format(path, line_number, e))
    if len(points) < MIN_POINTS:
        raise MalformedInput('{}: at least {} points are required, got {}.'.format(path, MIN_POINTS, len(points)))
    logger.debug('read %d points from %s', len(points), path)
    return as_points(points)

def format_points(points):
    """Return the textual "x,y x,y ..." form of a point sequence."""
    return ' '.join('{},{}'.format(util.format_number(x), util.format_number(y)) for x, y in numpy.asarray(points, dtype=float))