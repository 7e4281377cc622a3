"""
Tests for entity identity and the Active -> Disposed lifecycle.
"""

import pytest

from lingeom.core import DisposedAccessError, GeometricEntity
from lingeom.primitives import Hyperplane, Line


# Every guarded operation, as (name, call) pairs for a Line
LINE_OPERATIONS = [
    ("set_coefficients", lambda e: e.set_coefficients([1.0, 2.0, 3.0])),
    ("get_coefficients", lambda e: e.get_coefficients()),
    ("coefficients_tensor", lambda e: e.coefficients_tensor()),
    ("normal", lambda e: e.normal()),
    ("contains_point", lambda e: e.contains_point([0.0, 0.0])),
    ("distance_to_point", lambda e: e.distance_to_point([0.0, 0.0])),
    ("signed_distance_to_point", lambda e: e.signed_distance_to_point([0.0, 0.0])),
    ("evaluate", lambda e: e.evaluate([0.0, 0.0])),
    ("evaluate_points", lambda e: e.evaluate_points([[0.0, 0.0]])),
    ("distances_to_points", lambda e: e.distances_to_points([[0.0, 0.0]])),
    ("is_valid", lambda e: e.is_valid()),
    ("get_validation_message", lambda e: e.get_validation_message()),
    ("clone", lambda e: e.clone()),
    ("is_similar", lambda e: e.is_similar(None)),
    ("equation", lambda e: e.equation()),
    ("a0", lambda e: e.a0),
    ("a2", lambda e: e.a2),
]


class TestIdentity:
    """Tests for ids and the global creation count."""

    def test_ids_drawn_from_counter(self, counter):
        first = Line(counter=counter)
        second = Hyperplane(counter=counter)
        third = Line(1.0, 2.0, 3.0, counter=counter)
        assert (first.id, second.id, third.id) == (1, 2, 3)
        assert counter.total_created == 3

    def test_total_created_increments_once_per_construction(self):
        before = GeometricEntity.total_created()
        Line()
        Hyperplane(0.0, 1.0, 0.0, 0.0, 0.0)
        Line.from_line(Line(0.0, 1.0, 0.0))
        assert GeometricEntity.total_created() == before + 4

    def test_total_created_not_decremented_by_disposal(self):
        line = Line(0.0, 1.0, 0.0)
        before = GeometricEntity.total_created()
        line.dispose()
        assert GeometricEntity.total_created() == before

    def test_ids_never_reused(self, counter):
        ids = set()
        for _ in range(10):
            with Line(counter=counter) as line:
                ids.add(line.id)
        assert len(ids) == 10


class TestDisposal:
    """Tests for dispose() and the disposed guard."""

    def test_starts_active(self, line):
        assert not line.disposed

    def test_dispose_is_idempotent(self, line):
        line.dispose()
        line.dispose()
        assert line.disposed

    @pytest.mark.parametrize("name,operation", LINE_OPERATIONS, ids=[n for n, _ in LINE_OPERATIONS])
    def test_operations_fail_after_dispose(self, line, name, operation):
        line.dispose()
        with pytest.raises(DisposedAccessError):
            operation(line)

    def test_hyperplane_extra_coefficients_guarded(self, hyperplane):
        hyperplane.dispose()
        with pytest.raises(DisposedAccessError):
            hyperplane.a4

    def test_failed_set_does_not_partially_apply(self, line):
        line.dispose()
        with pytest.raises(DisposedAccessError):
            line.set_coefficients([1.0, 2.0])

    def test_identity_readable_after_dispose(self, line):
        line.dispose()
        assert line.id == 1
        assert line.dimension == 2
        assert line.disposed
        assert str(line) == "Line #1 (disposed)"
        assert repr(line) == "Line(id=1, disposed)"

    def test_similar_to_disposed_raises(self, counter):
        a = Line(1.0, 2.0, 3.0, counter=counter)
        b = Line(2.0, 4.0, 6.0, counter=counter)
        b.dispose()
        with pytest.raises(DisposedAccessError):
            a.is_similar(b)

    def test_copy_of_disposed_raises(self, line, hyperplane):
        line.dispose()
        hyperplane.dispose()
        with pytest.raises(DisposedAccessError):
            Line.from_line(line)
        with pytest.raises(DisposedAccessError):
            Hyperplane.from_hyperplane(hyperplane)

    def test_clone_survives_source_disposal(self, line):
        clone = line.clone()
        line.dispose()
        assert clone.contains_point([1.0, -1.0])


class TestScopedAcquisition:
    """Entities are context managers that dispose on exit."""

    def test_with_block_disposes(self, counter):
        with Line(0.0, 1.0, 0.0, counter=counter) as line:
            assert line.distance_to_point([2.0, 0.0]) == 2.0
        assert line.disposed

    def test_with_block_disposes_on_error(self, counter):
        with pytest.raises(ZeroDivisionError):
            with Hyperplane(counter=counter) as plane:
                1 / 0
        assert plane.disposed

    def test_exception_not_suppressed(self, counter):
        with pytest.raises(DisposedAccessError):
            with Line(counter=counter) as line:
                line.dispose()
                line.get_coefficients()
