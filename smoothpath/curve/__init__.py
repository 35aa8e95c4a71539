'''
Curve
-----
Functions for computing smooth Bezier splines through a sequence of points.
 - curve.geometry: joining lines, unit vectors and normals at each interior knot.
 - curve.handles: placement of the control points on either side of each knot.
 - curve.bezier: assembly of the curve segments, and evaluation of the curves.
 '''
