import collections
import numbers

import numpy

from . import geometry
from ..errors import DegenerateSegment, InvalidArgument

KnotHandles = collections.namedtuple('KnotHandles',
    ['index', 'knot', 'incoming_angle', 'outgoing_angle', 'incoming_length',
     'outgoing_length', 'incoming', 'outgoing'])
KnotHandles.__doc__ = """The two control points flanking an interior knot.

The incoming control point shapes the curve segment ending at the knot and
lies on the side of the previous knot; the outgoing control point shapes the
segment starting at the knot and lies on the side of the next knot. Both lie
on the control line: the line through the knot parallel to its joining line.
Angles are in radians.
"""

def check_scaling(scaling):
    """Return scaling as a float, raising InvalidArgument unless it is a real
    number in [0, 1]."""
    if isinstance(scaling, bool) or not isinstance(scaling, numbers.Real):
        raise InvalidArgument('Scaling must be a real number, not {!r}.'.format(scaling))
    scaling = float(scaling)
    if not 0 <= scaling <= 1:
        raise InvalidArgument('Scaling must be in the range [0, 1], got {}.'.format(scaling))
    return scaling

def handle_lengths(points, scaling, knots=None):
    """Return the lengths of the incoming and outgoing handles at each interior knot.

    The total handle span at a knot is scaling times the length of its joining
    line. That span is shared between the two handles in proportion to the
    lengths of the adjacent segments, so that the incoming and outgoing handle
    lengths are in the ratio |p[i]-p[i-1]| : |p[i+1]-p[i]|. An even split
    would make the curve bulge past the nearer knot when the spacing is uneven.

    Parameters:
    points: array of shape (n, 2)
    scaling: value in [0, 1]
    knots: list of geometry.KnotGeometry records for points. Computed if None.

    Returns: incoming, outgoing; arrays of shape (n-2,)

    Raises DegenerateSegment if two consecutive knots coincide."""
    scaling = check_scaling(scaling)
    if knots is None:
        knots = geometry.knot_geometry(points)
    segments = geometry.segment_lengths(points)
    zero = numpy.flatnonzero(segments == 0)
    if len(zero):
        i = int(zero[0])
        raise DegenerateSegment('Knots {} and {} coincide.'.format(i, i+1), index=i)
    previous = segments[:-1]
    following = segments[1:]
    span = scaling * numpy.array([knot.length for knot in knots])
    total = previous + following
    return span * (previous / total), span * (following / total)

def place_handles(points, scaling, knots=None):
    """Place the incoming and outgoing control points for each interior knot.

    Each control point is the knot displaced along the control line, in the
    direction found by rotating one of the joining line's normals by +90 degrees:
    normal_a rotates onto the direction of the previous knot (incoming side)
    and normal_b onto the direction of the next knot (outgoing side).

    Parameters:
    points: array of shape (n, 2)
    scaling: value in [0, 1]; 0 places every control point on its knot.
    knots: list of geometry.KnotGeometry records for points. Computed if None.

    Returns: list of n-2 KnotHandles records, in knot order."""
    if knots is None:
        knots = geometry.knot_geometry(points)
    incoming_lengths, outgoing_lengths = handle_lengths(points, scaling, knots)
    handles = []
    for knot, r_in, r_out in zip(knots, incoming_lengths, outgoing_lengths):
        incoming_angle = numpy.arctan2(knot.normal_a[1], knot.normal_a[0]) + numpy.pi/2
        outgoing_angle = numpy.arctan2(knot.normal_b[1], knot.normal_b[0]) + numpy.pi/2
        incoming = knot.knot + numpy.array([numpy.cos(incoming_angle), numpy.sin(incoming_angle)]) * r_in
        outgoing = knot.knot + numpy.array([numpy.cos(outgoing_angle), numpy.sin(outgoing_angle)]) * r_out
        handles.append(KnotHandles(knot.index, knot.knot, incoming_angle, outgoing_angle,
            r_in, r_out, incoming, outgoing))
    return handles

def end_controls(handles):
    """Return the single control points for the first and last curve segments.

    The first and last knots have no handles of their own, so the end segments
    are quadratic. Each uses the one control point on its side of the adjacent
    interior knot: the first segment the incoming control point of the second
    knot, the last segment the outgoing control point of the second-to-last knot.

    Returns: first_control, last_control"""
    return handles[0].incoming, handles[-1].outgoing
