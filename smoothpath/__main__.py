import argparse
import logging
import sys

from . import diagnostics
from . import points as _points
from . import svg
from . import util
from .curve import bezier

logger = logging.getLogger(__name__)

def _non_negative_int(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError('must not be negative: {}'.format(value))
    return value

def _parse_args(argv):
    parser = argparse.ArgumentParser(prog='smoothpath',
        description='Draw a smooth Bezier spline through a sequence of points.')
    parser.add_argument('points', nargs='*', metavar='X,Y',
        help='knots of the spline, e.g. "50,182 100,166 150,87"')
    parser.add_argument('-f', '--file', metavar='PATH',
        help='read knots from a comma-delimited file instead, one x,y per line')
    parser.add_argument('-s', '--scaling', type=float, default=bezier.DEFAULT_SCALING,
        help='curviness in [0, 1] (default: %(default)s)')
    parser.add_argument('--precision', type=_non_negative_int, default=None,
        help='maximum digits after the decimal point in the output')
    parser.add_argument('--svg', metavar='PATH',
        help='write an SVG document to PATH instead of printing path data')
    parser.add_argument('--diagnostics', action='store_true',
        help='draw the construction of the control points in the SVG document, '
             'or print a table of it if --svg is not given')
    parser.add_argument('--json', metavar='PATH',
        help='write the construction values of each knot to PATH as JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debugging information')
    args = parser.parse_args(argv)
    if bool(args.points) == bool(args.file):
        parser.error('give either knots on the command line or a --file, not both or neither')
    return parser, args

def main(argv=None):
    parser, args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')
    try:
        if args.file:
            knots = _points.read_points(args.file)
        else:
            knots = _points.parse_points(' '.join(args.points))
        spline = bezier.synthesize_spline(knots, args.scaling)
        records = None
        if args.diagnostics or args.json:
            records = diagnostics.construction_records(knots, args.scaling)
        _write_output(args, knots, spline, records)
    except (ValueError, OSError) as e:
        parser.exit(2, '{}: error: {}\n'.format(parser.prog, e))
    return 0

def _write_output(args, knots, spline, records):
    if args.json:
        util.json_encode_atomic_legible_to_file(records, args.json)
        logger.debug('wrote construction records to %s', args.json)
    if args.svg:
        overlay = diagnostics.overlay_elements(records) if args.diagnostics else None
        document = svg.svg_document(spline, knots=knots, overlay=overlay, precision=args.precision)
        svg.write_svg(args.svg, document)
    else:
        if args.diagnostics:
            print(diagnostics.format_table(records))
        print(svg.path_data(spline, args.precision))

if __name__ == '__main__':
    sys.exit(main())
