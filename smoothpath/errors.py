class InvalidArgument(ValueError):
    """Raised for arguments outside the contract of the spline functions: too
    few points, badly-shaped point arrays, or a scaling factor outside [0, 1]."""
    pass

class MalformedInput(ValueError):
    """Raised when textual point data cannot be parsed into x,y pairs."""
    pass

class DegenerateSegment(ValueError):
    """Raised when no direction can be derived at a knot because two knots
    coincide.

    The 'index' attribute gives the (0-based) position of the affected knot
    in the input point sequence."""
    def __init__(self, message, index):
        super().__init__(message)
        self.index = index
