"""Unit tests for planar and spatial segments."""

import math

import pytest

from planargeom.config import GeometryConfig
from planargeom.core import ParametrizedLine, Segment, Segment3
from planargeom.domain import Vector, Vector3

ZERO = Vector(0.0, 0.0)
I = Vector(1.0, 0.0)
J = Vector(0.0, 1.0)
ONE = I + J


class TestSegmentBasics:
    """Tests for segment construction and measurements."""

    def test_from_origin(self):
        """from_origin starts at zero."""
        iseg = Segment.from_origin(I)
        assert iseg.start == ZERO
        assert iseg.end == I
        assert iseg.displacement() == I
        assert iseg.length_squared() == 1.0
        assert iseg.length() == 1.0

    @pytest.mark.parametrize(
        ("start", "end", "displacement"),
        [
            (I, ONE, J),
            (J, ONE, I),
            (ZERO, J, J),
        ],
    )
    def test_unit_segments(self, start, end, displacement):
        """Unit segments have unit length."""
        seg = Segment(start, end)
        assert seg.displacement() == displacement
        assert seg.length_squared() == 1.0
        assert seg.length() == 1.0

    def test_diagonal(self):
        """The unit diagonal has length sqrt(2)."""
        diag = Segment(ZERO, ONE)
        assert diag.displacement() == ONE
        assert diag.length_squared() == 2.0
        assert diag.length() == pytest.approx(math.sqrt(2.0))

    def test_custom_sqrt(self):
        """The square root routine is injectable."""
        calls = []

        def counting_sqrt(value: float) -> float:
            calls.append(value)
            return math.sqrt(value)

        assert Segment(ZERO, Vector(3.0, 4.0)).length(counting_sqrt) == 5.0
        assert calls == [25.0]

    def test_as_line(self):
        """as_line yields a directed line terminated at 1."""
        line = Segment(I, ONE).as_line()
        assert isinstance(line, ParametrizedLine)
        assert line.start == I
        assert line.direction == J
        assert line.directed and line.terminated
        assert line.termination_parameter == 1.0

    def test_point_at(self):
        """point_at interpolates between the endpoints."""
        assert Segment(ZERO, Vector(2.0, 4.0)).point_at(0.25) == Vector(0.5, 1.0)


class TestSegmentIntersection:
    """Tests for segment/segment intersection."""

    def test_cross_intersection(self):
        """Crossing diagonals meet at their midpoints."""
        up = Segment(ZERO, ONE)
        down = Segment(J, I)

        inter1 = up.intersect(down)
        inter2 = down.intersect(up)

        assert inter1.has_hit()
        assert inter2.has_hit()
        assert inter1.position == Vector(0.5, 0.5)
        assert inter2.position == Vector(0.5, 0.5)
        assert inter1.this_parameter == 0.5
        assert inter1.other_parameter == 0.5
        assert inter2.this_parameter == 0.5
        assert inter2.other_parameter == 0.5

    def test_parallel_segments(self):
        """Parallel segments do not intersect."""
        down = Segment(ZERO, I)
        up = Segment(J, I + J)
        assert not up.intersect(down).has_hit()

    def test_segments_that_would_cross_if_extended(self):
        """Segments only meet within their extents."""
        a = Segment(ZERO, Vector(0.4, 0.4))
        b = Segment(J, I)
        assert not a.intersect(b).has_hit()

    def test_touching_at_endpoint(self):
        """Endpoints are inside the closed parameter range."""
        a = Segment(ZERO, I)
        b = Segment(I, Vector(1.0, 1.0))
        inter = a.intersect(b)
        assert inter.has_hit()
        assert inter.this_parameter == 1.0
        assert inter.other_parameter == 0.0

    def test_segment_against_ray(self):
        """Segments intersect rays directly."""
        seg = Segment(Vector(0.5, 0.5) - I, Vector(0.5, 0.5))
        ray = ParametrizedLine.ray(Vector(0.0, 2.0), Vector(0.0, -1.0))
        inter = seg.intersect(ray)
        assert inter.this_parameter == pytest.approx(0.5)
        assert inter.other_parameter == pytest.approx(1.5)


class TestSegment3:
    """Tests for spatial segments."""

    def test_basics(self):
        """Spatial segment displacement and length."""
        i3 = Vector3(1.0, 0.0, 0.0)
        j3 = Vector3(0.0, 1.0, 0.0)
        seg = Segment3.from_origin(i3)
        assert seg.start == Vector3(0.0, 0.0, 0.0)
        assert seg.displacement() == i3
        assert seg.length_squared() == 1.0
        assert Segment3(i3, i3 + j3).length() == 1.0

    def test_planar_cross(self):
        """Crossing segments in the z=0 plane meet midway."""
        up = Segment3((0, 0, 0), (1, 1, 0))
        down = Segment3((0, 1, 0), (1, 0, 0))
        inter = up.intersect(down)
        assert inter.has_hit()
        assert inter.position == Vector3(0.5, 0.5, 0.0)
        assert inter.this_parameter == 0.5
        assert inter.other_parameter == 0.5

    def test_spatial_cross(self):
        """Sloped segments meet at matching height."""
        uu = Segment3((0.0, 0.0, 0.0), (1.0, 1.0, 0.1))
        dd = Segment3((0.0, 1.0, 0.1), (1.0, 0.0, 0.0))
        inter = uu.intersect(dd)
        assert inter.has_hit()
        assert inter.position.x == pytest.approx(0.5)
        assert inter.position.y == pytest.approx(0.5)
        assert inter.position.z == pytest.approx(0.05)
        assert inter.this_parameter == pytest.approx(0.5)
        assert inter.other_parameter == pytest.approx(0.5)

    def test_skew_segments_miss(self):
        """Crossing projections at different heights do not intersect."""
        low = Segment3((0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
        high = Segment3((0.0, 1.0, 1.0), (1.0, 0.0, 1.0))
        assert not low.intersect(high).has_hit()

    def test_skew_segments_within_tolerance(self):
        """The receiver's z_tolerance decides the height mismatch."""
        config = GeometryConfig(z_tolerance=0.05)
        low = Segment3((0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
        high = Segment3((0.0, 1.0, 0.01), (1.0, 0.0, 0.01), config=config)
        assert high.intersect(low).has_hit()
        assert not low.intersect(high).has_hit()

    def test_length_uses_injected_sqrt(self):
        """length() routes through the supplied square root."""
        calls = []

        def counting_sqrt(value):
            calls.append(value)
            return math.sqrt(value)

        seg = Segment3((0, 0, 0), (2, 3, 6))
        assert seg.length(counting_sqrt) == 7.0
        assert calls == [49.0]

    def test_default_configs_are_independent(self):
        """Each segment built without a config owns its own tolerances."""
        a = Segment3((0, 0, 0), (1, 1, 0))
        b = Segment3((0, 1, 0), (1, 0, 0))
        a.config.z_tolerance = 1.0
        assert b.config.z_tolerance == 1e-9

    def test_parallel_projection(self):
        """Parallel xy projections never intersect."""
        down = Segment3((0, 0, 0), (1, 0, 0))
        up = Segment3((0, 1, 0), (1, 1, 0))
        vertical = Segment3((1, 1, 0), (1, 1, 0.1))
        horizontal = Segment3((0, 1, 0), (1, 0, 0))
        assert not up.intersect(down).has_hit()
        assert not horizontal.intersect(vertical).has_hit()
