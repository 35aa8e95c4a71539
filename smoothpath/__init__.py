'''
# smoothpath

Draw an ordered sequence of 2D points as a smooth curve: a spline of Bezier
segments that passes through every point, with no cusps at the points and with
curvature that follows the local spacing of the points. Useful for rounding
off line charts and freehand polylines without changing the data.

Example:
    from smoothpath import points, svg
    from smoothpath.curve import bezier
    knots = points.parse_points('50,182 100,166 150,87 200,191 250,106')
    spline = bezier.synthesize_spline(knots, scaling=0.4)
    print(svg.path_data(spline))

Curve
-----
Functions for computing the spline, with points as numpy arrays of shape (n, 2).
 - curve.geometry: joining lines, unit vectors and normals at each interior knot.
 - curve.handles: placement of the control points on either side of each knot.
 - curve.bezier: assembly of the curve segments, and evaluation of the curves.

Input and output
----------------
 - points: validate point arrays and parse them from text or delimited files.
 - svg: convert splines to SVG path data and documents.
 - diagnostics: tables, JSON and SVG overlays of the intermediate construction values.
 - util: number formatting, JSON encoding and atomic file writing.

Running "python -m smoothpath" provides a command-line interface to the above.
'''
