"""
Tests for lingeom.core: tolerance policy, error taxonomy, instance counter
and the proportionality scan.
"""

import pytest

from lingeom.core import (
    EPSILON,
    DEFAULT_COUNTER,
    LINE_DIMENSION,
    LINE_NUM_COEFFICIENTS,
    HYPERPLANE_DIMENSION,
    HYPERPLANE_NUM_COEFFICIENTS,
    PROBE_POINTS,
    GeometricEntity,
    GeometryError,
    InvalidArgumentError,
    InvalidStateError,
    DisposedAccessError,
    InstanceCounter,
    coefficients_proportional,
)
from lingeom.primitives import Hyperplane, Line


class TestConstants:
    """Tests for the fixed tolerance and layout."""

    def test_epsilon_value(self):
        assert EPSILON == 1e-10

    def test_layout(self):
        assert LINE_DIMENSION == 2
        assert LINE_NUM_COEFFICIENTS == 3
        assert HYPERPLANE_DIMENSION == 4
        assert HYPERPLANE_NUM_COEFFICIENTS == 5

    def test_probe_points_are_origins(self):
        assert PROBE_POINTS[2] == (0.0, 0.0)
        assert PROBE_POINTS[4] == (0.0, 0.0, 0.0, 0.0)


class TestExceptions:
    """Errors can be caught by domain base or builtin category."""

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, GeometryError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_invalid_state_is_runtime_error(self):
        assert issubclass(InvalidStateError, GeometryError)
        assert issubclass(InvalidStateError, RuntimeError)

    def test_disposed_access_is_runtime_error(self):
        assert issubclass(DisposedAccessError, GeometryError)
        assert issubclass(DisposedAccessError, RuntimeError)


class TestInstanceCounter:
    """Tests for the id source."""

    def test_first_id_is_one(self):
        counter = InstanceCounter()
        assert counter.total_created == 0
        assert counter.next_id() == 1
        assert counter.total_created == 1

    def test_ids_strictly_increase(self):
        counter = InstanceCounter()
        ids = [counter.next_id() for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_custom_start(self):
        counter = InstanceCounter(start=100)
        assert counter.next_id() == 101

    def test_total_created_counts_injected_counters(self):
        before = GeometricEntity.total_created()
        Line(0.0, 1.0, 0.0, counter=InstanceCounter())
        Hyperplane(0.0, 1.0, 0.0, 0.0, 0.0, counter=InstanceCounter())
        assert GeometricEntity.total_created() == before + 2

    def test_total_created_counts_default_counter(self):
        before = GeometricEntity.total_created()
        ids_before = DEFAULT_COUNTER.total_created
        Line(0.0, 1.0, 0.0)
        assert GeometricEntity.total_created() == before + 1
        assert DEFAULT_COUNTER.total_created == ids_before + 1

    def test_total_created_counts_copies(self, counter):
        source = Line(0.0, 1.0, 0.0, counter=counter)
        before = GeometricEntity.total_created()
        source.clone()
        Hyperplane.from_hyperplane(Hyperplane(0.0, 1.0, 0.0, 0.0, 0.0, counter=counter))
        assert GeometricEntity.total_created() == before + 3

    def test_failed_construction_not_counted(self):
        before = GeometricEntity.total_created()
        with pytest.raises(InvalidArgumentError):
            Line(1.0, 2.0, counter=InstanceCounter())
        assert GeometricEntity.total_created() == before

    def test_next_id_alone_not_counted(self):
        before = GeometricEntity.total_created()
        InstanceCounter().next_id()
        assert GeometricEntity.total_created() == before

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            GeometricEntity()


class TestCoefficientsProportional:
    """The proportionality scan, including its zero-handling policy."""

    def test_scaled_vectors(self):
        assert coefficients_proportional((1.0, 2.0, 3.0), (2.0, 4.0, 6.0))

    def test_negative_ratio(self):
        assert coefficients_proportional((1.0, -2.0, 3.0), (-0.5, 1.0, -1.5))

    def test_non_proportional(self):
        assert not coefficients_proportional((1.0, 2.0, 3.0), (1.0, 1.0, 1.0))

    def test_shared_zero_positions(self):
        assert coefficients_proportional((0.0, 1.0, 0.0), (0.0, 2.0, 0.0))

    def test_zero_paired_with_non_zero(self):
        assert not coefficients_proportional((0.0, 1.0, 0.0), (1.0, 1.0, 0.0))
        assert not coefficients_proportional((1.0, 1.0, 0.0), (0.0, 1.0, 0.0))

    def test_all_zero_is_not_proportional(self):
        assert not coefficients_proportional((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    def test_values_below_epsilon_count_as_zero(self):
        assert coefficients_proportional((1e-12, 1.0, 2.0), (0.0, 3.0, 6.0))

    def test_ratio_mismatch_above_epsilon(self):
        assert not coefficients_proportional((1.0, 2.0), (1.0, 2.0 + 1e-6))

    def test_length_mismatch(self):
        assert not coefficients_proportional((1.0, 2.0, 3.0), (1.0, 2.0, 3.0, 0.0, 0.0))
