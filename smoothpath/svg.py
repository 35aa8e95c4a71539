import logging

import numpy

from . import util
from .curve import bezier

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'

def _pair(point, precision):
    return '{},{}'.format(util.format_number(point[0], precision), util.format_number(point[1], precision))

def path_data(spline, precision=None):
    """Return SVG path data for a spline.

    The start knot becomes "M x,y", quadratic segments "Q cx,cy ex,ey" and cubic
    segments "C c1x,c1y c2x,c2y ex,ey", all joined by single spaces.

    Parameters:
    spline: bezier.Spline
    precision: maximum number of digits after the decimal point, or None for
        the shortest representation that round-trips exactly."""
    commands = ['M ' + _pair(spline.start, precision)]
    for segment in spline.segments:
        if isinstance(segment, bezier.Quadratic):
            commands.append('Q {} {}'.format(_pair(segment.control, precision), _pair(segment.end, precision)))
        elif isinstance(segment, bezier.Cubic):
            commands.append('C {} {} {}'.format(_pair(segment.control1, precision),
                _pair(segment.control2, precision), _pair(segment.end, precision)))
        else:
            raise TypeError('Unknown curve segment type: {}'.format(type(segment).__name__))
    return ' '.join(commands)

def polyline_data(points, precision=None):
    """Return SVG path data for the straight-line polyline through the points."""
    points = numpy.asarray(points, dtype=float)
    commands = ['M ' + _pair(points[0], precision)]
    commands.extend('L ' + _pair(point, precision) for point in points[1:])
    return ' '.join(commands)

def bounding_box(spline):
    """Return (min_x, min_y, max_x, max_y) of the knots and control points of
    a spline. Bezier curves never leave the convex hull of their control
    points, so this box contains the whole curve."""
    points = bezier.control_polygon(spline)
    (x0, y0), (x1, y1) = points.min(axis=0), points.max(axis=0)
    return x0, y0, x1, y1

def svg_document(spline, width=None, height=None, margin=10, stroke='black',
        stroke_width=2, knots=None, overlay=None, precision=None):
    """Return a standalone SVG document drawing a spline.

    Parameters:
    spline: bezier.Spline
    width, height: size attributes of the document. If None, the size of the
        view box is used.
    margin: space added around the bounding box of the spline.
    stroke, stroke_width: presentation attributes of the curve.
    knots: if not None, array of knots to mark with small circles.
    overlay: if not None, list of additional SVG element strings (such as from
        diagnostics.overlay_elements()) drawn above the curve.
    precision: number formatting precision, as in path_data().
    """
    x0, y0, x1, y1 = bounding_box(spline)
    view_box = [x0 - margin, y0 - margin, x1 - x0 + 2*margin, y1 - y0 + 2*margin]
    if width is None:
        width = view_box[2]
    if height is None:
        height = view_box[3]
    fmt = lambda v: util.format_number(v, precision)
    lines = ['<svg xmlns="{}" width="{}" height="{}" viewBox="{}">'.format(
        SVG_NS, fmt(width), fmt(height), ' '.join(map(fmt, view_box)))]
    lines.append('  <path d="{}" fill="none" stroke="{}" stroke-width="{}"/>'.format(
        path_data(spline, precision), stroke, fmt(stroke_width)))
    if knots is not None:
        lines.append('  <g class="knots" fill="{}">'.format(stroke))
        for x, y in numpy.asarray(knots, dtype=float):
            lines.append('    <circle cx="{}" cy="{}" r="{}"/>'.format(fmt(x), fmt(y), fmt(stroke_width * 1.5)))
        lines.append('  </g>')
    if overlay:
        lines.append('  <g class="diagnostics">')
        lines.extend('    ' + element for element in overlay)
        lines.append('  </g>')
    lines.append('</svg>')
    return '\n'.join(lines) + '\n'

def write_svg(path, document):
    """Atomically write an SVG document string to path."""
    util.write_atomic(document, path)
    logger.debug('wrote SVG document to %s', path)
