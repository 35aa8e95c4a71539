import collections

import numpy

from ..errors import DegenerateSegment

KnotGeometry = collections.namedtuple('KnotGeometry',
    ['index', 'knot', 'joining', 'length', 'unit', 'normal_a', 'normal_b'])
KnotGeometry.__doc__ = """Derived vectors at an interior knot.

index: position of the knot in the point sequence (0-based; always between 1 and n-2)
knot: the knot itself
joining: vector from the previous knot to the next knot
length: length of the joining vector
unit: joining vector normalized to unit length
normal_a: unit perpendicular rotated +90 degrees from unit
normal_b: unit perpendicular rotated -90 degrees from unit
"""

def joining_vectors(points):
    """Return the vectors joining the neighbors of each interior knot.

    Parameters:
    points: array of shape (n, 2)

    Returns: array of shape (n-2, 2), where row j is points[j+2] - points[j]"""
    points = numpy.asarray(points, dtype=float)
    return points[2:] - points[:-2]

def _norms(vectors):
    # hypot neither overflows nor underflows for finite coordinates
    return numpy.hypot(vectors[:, 0], vectors[:, 1])

def segment_lengths(points):
    """Return the lengths of the n-1 straight segments between consecutive points."""
    points = numpy.asarray(points, dtype=float)
    return _norms(points[1:] - points[:-1])

def find_normals(vectors):
    """Return unit vectors along the input vectors and the two unit perpendiculars.

    Parameters:
    vectors: array of shape (n, 2), none of which may be zero-length.

    Returns: unit, normal_a, normal_b; each of shape (n, 2). normal_a is unit
    rotated by +90 degrees and normal_b is unit rotated by -90 degrees."""
    vectors = numpy.asarray(vectors, dtype=float)
    lengths = _norms(vectors)
    unit = vectors / lengths[:, numpy.newaxis]
    normal_a = numpy.roll(unit, 1, axis=-1)
    normal_a[:, 0] *= -1
    normal_b = -normal_a
    return unit, normal_a, normal_b

def knot_geometry(points):
    """Compute the joining-line geometry at every interior knot.

    Parameters:
    points: array of shape (n, 2), n >= 3 (see points.as_points)

    Returns: list of n-2 KnotGeometry records, in knot order.

    Raises DegenerateSegment if the two neighbors of some knot coincide, as
    then the joining line has no direction."""
    points = numpy.asarray(points, dtype=float)
    joining = joining_vectors(points)
    lengths = _norms(joining)
    zero = numpy.flatnonzero(lengths == 0)
    if len(zero):
        i = int(zero[0]) + 1
        raise DegenerateSegment('The neighbors of knot {} ({}) coincide at {}.'.format(
            i, _point_str(points[i]), _point_str(points[i-1])), index=i)
    unit, normal_a, normal_b = find_normals(joining)
    return [KnotGeometry(i+1, points[i+1], *record) for i, record in
        enumerate(zip(joining, lengths, unit, normal_a, normal_b))]

def _point_str(point):
    return '({:g}, {:g})'.format(*point)
