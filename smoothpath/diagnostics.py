"""Inspect the construction of a spline.

These functions expose the intermediate values computed while placing the
control points (joining lines, normals, angles and handles) for printing,
saving or drawing on top of the curve. They use the same functions as
bezier.synthesize_spline(), and have no effect on its output.
"""

from . import points as _points
from . import util
from .curve import geometry
from .curve import handles as _handles

def construction_records(points, scaling):
    """Return a list of dicts, one per interior knot, containing every
    intermediate value used to place that knot's control points."""
    points = _points.as_points(points)
    scaling = _handles.check_scaling(scaling)
    knots = geometry.knot_geometry(points)
    knot_handles = _handles.place_handles(points, scaling, knots)
    records = []
    for knot, handle in zip(knots, knot_handles):
        record = dict(knot._asdict())
        record.update(handle._asdict())
        record['previous'] = points[knot.index - 1]
        record['next'] = points[knot.index + 1]
        records.append(record)
    return records

_TABLE_COLUMNS = [
    ('index', lambda r: str(r['index'])),
    ('knot', lambda r: _pair(r['knot'])),
    ('joining', lambda r: _pair(r['joining'])),
    ('length', lambda r: _num(r['length'])),
    ('unit', lambda r: _pair(r['unit'])),
    ('normal a', lambda r: _pair(r['normal_a'])),
    ('normal b', lambda r: _pair(r['normal_b'])),
    ('in angle', lambda r: _num(r['incoming_angle'])),
    ('out angle', lambda r: _num(r['outgoing_angle'])),
    ('in length', lambda r: _num(r['incoming_length'])),
    ('out length', lambda r: _num(r['outgoing_length'])),
    ('in control', lambda r: _pair(r['incoming'])),
    ('out control', lambda r: _pair(r['outgoing'])),
]

def _num(value, precision=3):
    return util.format_number(value, precision)

def _pair(point, precision=3):
    return '{},{}'.format(_num(point[0], precision), _num(point[1], precision))

def format_table(records):
    """Return a plain-text table of construction records, one row per knot,
    with values rounded to three decimal places."""
    header = [title for title, fmt in _TABLE_COLUMNS]
    rows = [[fmt(record) for title, fmt in _TABLE_COLUMNS] for record in records]
    widths = [max(len(row[i]) for row in [header] + rows) for i in range(len(header))]
    lines = []
    for row in [header] + rows:
        lines.append('  '.join(cell.rjust(width) for cell, width in zip(row, widths)).rstrip())
    lines.insert(1, '  '.join('-' * width for width in widths))
    return '\n'.join(lines)

def overlay_elements(records, joining_stroke='#bbbbbb', control_stroke='#dd4444', radius=3):
    """Return SVG elements illustrating the construction of each knot's handles.

    For each interior knot, this draws its joining line (dashed), its control
    line through the two handles, and a dot at each control point.

    Returns: list of SVG element strings."""
    fmt = lambda point: [util.format_number(v) for v in point]
    elements = []
    for record in records:
        elements.append('<line x1="{}" y1="{}" x2="{}" y2="{}" stroke="{}" stroke-dasharray="4,4"/>'.format(
            *fmt(record['previous']), *fmt(record['next']), joining_stroke))
        elements.append('<line x1="{}" y1="{}" x2="{}" y2="{}" stroke="{}"/>'.format(
            *fmt(record['incoming']), *fmt(record['outgoing']), control_stroke))
        for control in (record['incoming'], record['outgoing']):
            elements.append('<circle cx="{}" cy="{}" r="{}" fill="{}"/>'.format(*fmt(control), radius, control_stroke))
    return elements

def dump_records(records, f):
    """Write construction records as legible JSON to an open file handle."""
    util.json_encode_legible_to_file(records, f)
