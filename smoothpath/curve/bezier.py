import collections
import logging

import numpy
from scipy import special

from . import geometry
from . import handles as _handles
from .. import points as _points

logger = logging.getLogger(__name__)

DEFAULT_SCALING = 0.4

Quadratic = collections.namedtuple('Quadratic', ['start', 'control', 'end'])
Cubic = collections.namedtuple('Cubic', ['start', 'control1', 'control2', 'end'])
Spline = collections.namedtuple('Spline', ['start', 'segments'])
Spline.__doc__ = """A smooth path through a sequence of knots.

start: the first knot
segments: list of Quadratic and Cubic curves, each starting where the
    previous one ends. The first and last are Quadratic, all others Cubic.
"""

def assemble(points, handles):
    """Order knots and control points into the curve segments of a spline.

    Parameters:
    points: array of shape (n, 2)
    handles: list of n-2 handles.KnotHandles records for the interior knots.

    Returns: Spline with n-1 segments."""
    points = numpy.asarray(points, dtype=float)
    first_control, last_control = _handles.end_controls(handles)
    segments = [Quadratic(points[0], first_control, points[1])]
    for h0, h1 in zip(handles[:-1], handles[1:]):
        segments.append(Cubic(h0.knot, h0.outgoing, h1.incoming, h1.knot))
    segments.append(Quadratic(points[-2], last_control, points[-1]))
    return Spline(points[0], segments)

def synthesize_spline(points, scaling=DEFAULT_SCALING):
    """Build a smooth Bezier spline passing through the given points.

    The control points on either side of each interior knot lie on a line
    through the knot parallel to the line joining its two neighbors, so
    consecutive curve segments meet without a cusp. Handle lengths follow the
    local spacing of the knots.

    Parameters:
    points: array-like of n (x, y) points, n >= 3
    scaling: curviness, in [0, 1]. 0 gives straight segments; values of about
        0.33 to 0.5 give pleasing curves.

    Returns: Spline

    Raises:
    InvalidArgument: too few points or scaling out of range.
    DegenerateSegment: coincident neighboring or flanking knots."""
    points = _points.as_points(points)
    scaling = _handles.check_scaling(scaling)
    knots = geometry.knot_geometry(points)
    knot_handles = _handles.place_handles(points, scaling, knots)
    spline = assemble(points, knot_handles)
    logger.debug('synthesized spline with %d segments from %d knots (scaling=%g)',
        len(spline.segments), len(points), scaling)
    return spline

def evaluate_segment(segment, t):
    """Evaluate a Quadratic or Cubic curve at parameter values t in [0, 1].

    Returns: array of shape (len(t), 2), or (2,) for scalar t."""
    control_points = numpy.array(segment, dtype=float)
    degree = len(control_points) - 1
    t = numpy.asarray(t, dtype=float)
    scalar = t.ndim == 0
    t = numpy.atleast_1d(t)[:, numpy.newaxis]
    i = numpy.arange(degree + 1)
    # Bernstein basis polynomials, shape (len(t), degree+1)
    basis = special.comb(degree, i) * t**i * (1 - t)**(degree - i)
    out = basis @ control_points
    if scalar:
        return out[0]
    return out

def spline_points(spline, points_per_segment=20):
    """Approximate a spline by a polyline.

    Each segment is evaluated at points_per_segment+1 equally-spaced parameter
    values; the knot shared by consecutive segments is included once.

    Returns: array of shape (len(segments)*points_per_segment + 1, 2)"""
    t = numpy.linspace(0, 1, points_per_segment + 1)
    parts = [evaluate_segment(spline.segments[0], t)]
    for segment in spline.segments[1:]:
        parts.append(evaluate_segment(segment, t)[1:])
    return numpy.concatenate(parts)

def control_polygon(spline):
    """Return the knots and control points of a spline in drawing order."""
    out = [spline.start]
    for segment in spline.segments:
        out.extend(segment[1:])
    return numpy.array(out)
