import numpy
import pytest

from smoothpath.curve import geometry
from smoothpath.curve import handles
from smoothpath.errors import DegenerateSegment, InvalidArgument

KNOTS = numpy.array([(50, 182), (100, 166), (150, 87), (200, 191), (250, 106)], dtype=float)

@pytest.mark.parametrize('scaling', [1.5, -0.1, numpy.nan, numpy.inf, True, '0.5', None])
def test_check_scaling_rejects(scaling):
    with pytest.raises(InvalidArgument):
        handles.check_scaling(scaling)

def test_check_scaling_accepts_bounds():
    assert handles.check_scaling(0) == 0.0
    assert handles.check_scaling(1) == 1.0
    assert handles.check_scaling(numpy.float32(0.5)) == 0.5

def test_handle_lengths_follow_spacing():
    incoming, outgoing = handles.handle_lengths(KNOTS, 0.4)
    segments = geometry.segment_lengths(KNOTS)
    lengths = numpy.linalg.norm(geometry.joining_vectors(KNOTS), axis=1)
    numpy.testing.assert_allclose(incoming / outgoing, segments[:-1] / segments[1:])
    numpy.testing.assert_allclose(incoming + outgoing, 0.4 * lengths)

def test_handle_lengths_even_spacing_splits_evenly():
    incoming, outgoing = handles.handle_lengths([(0, 0), (1, 1), (2, 0)], 0.5)
    numpy.testing.assert_allclose(incoming, [0.5])
    numpy.testing.assert_allclose(outgoing, [0.5])

def test_adjacent_duplicate_knots_are_fatal():
    with pytest.raises(DegenerateSegment) as excinfo:
        handles.handle_lengths([(0, 0), (1, 0), (1, 0), (2, 1)], 0.4)
    assert excinfo.value.index == 1

def test_place_handles_geometry():
    knot_handles = handles.place_handles(KNOTS, 0.4)
    assert len(knot_handles) == 3
    for knot, handle in zip(geometry.knot_geometry(KNOTS), knot_handles):
        numpy.testing.assert_array_equal(handle.knot, knot.knot)
        # the control line is parallel to the joining line
        control_line = handle.outgoing - handle.incoming
        control_line /= numpy.linalg.norm(control_line)
        assert abs(numpy.dot(control_line, knot.unit)) == pytest.approx(1)
        # outgoing handle points toward the next knot, incoming toward the previous one
        numpy.testing.assert_allclose(handle.outgoing, knot.knot + knot.unit * handle.outgoing_length)
        numpy.testing.assert_allclose(handle.incoming, knot.knot - knot.unit * handle.incoming_length)
        assert numpy.linalg.norm(handle.outgoing - handle.knot) == pytest.approx(handle.outgoing_length)
        assert numpy.linalg.norm(handle.incoming - handle.knot) == pytest.approx(handle.incoming_length)

def test_place_handles_zero_scaling():
    for handle in handles.place_handles(KNOTS, 0):
        numpy.testing.assert_array_equal(handle.incoming, handle.knot)
        numpy.testing.assert_array_equal(handle.outgoing, handle.knot)

def test_angles_from_rotated_normals():
    handle, = handles.place_handles([(0, 0), (1, 1), (2, 2)], 0.5)
    assert handle.outgoing_angle == pytest.approx(numpy.pi / 4)
    assert numpy.cos(handle.incoming_angle) == pytest.approx(-numpy.sqrt(0.5))
    assert numpy.sin(handle.incoming_angle) == pytest.approx(-numpy.sqrt(0.5))

def test_end_controls():
    knot_handles = handles.place_handles(KNOTS, 0.4)
    first, last = handles.end_controls(knot_handles)
    numpy.testing.assert_array_equal(first, knot_handles[0].incoming)
    numpy.testing.assert_array_equal(last, knot_handles[-1].outgoing)
