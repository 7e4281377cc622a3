"""
Tests for the console readers and report formatting.
"""

import pytest

from lingeom.collection import (
    CollectionStatistics,
    DemonstrationReport,
    PointCheckResult,
    STATUS_CHECKED,
    STATUS_DIMENSION_MISMATCH,
    STATUS_DISPOSED,
    STATUS_ERROR,
)
from lingeom.console import (
    format_demonstration,
    format_entity_info,
    format_point_check,
    format_statistics,
    read_coefficients,
    read_dimension,
    read_float,
    read_int,
    read_point,
)


class ScriptedConsole:
    """Feeds canned answers to a reader and records what it prints."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def print(self, text):
        self.output.append(text)


class TestReaders:

    def test_read_float(self):
        con = ScriptedConsole(" 2.5 ")
        assert read_float("> ", con.input, con.print) == 2.5
        assert con.output == []

    def test_read_float_retries(self):
        con = ScriptedConsole("abc", "1,5", "-3")
        assert read_float("> ", con.input, con.print) == -3.0
        assert len(con.prompts) == 3
        assert len(con.output) == 2

    def test_read_int_minimum(self):
        con = ScriptedConsole("0", "x", "3")
        assert read_int("> ", min_value=1, input_fn=con.input, output_fn=con.print) == 3
        assert con.output[0] == "Error: enter a valid integer (minimum 1)."

    def test_read_int_no_minimum(self):
        con = ScriptedConsole("-7")
        assert read_int("> ", input_fn=con.input, output_fn=con.print) == -7

    def test_read_dimension(self):
        con = ScriptedConsole("3", "two", "4")
        assert read_dimension("> ", con.input, con.print) == 4
        assert con.output == ["Error: only dimensions 2 and 4 are supported."] * 2

    def test_read_coefficients(self):
        con = ScriptedConsole("1", "2", "3")
        assert read_coefficients(3, "Line", con.input, con.print) == [1.0, 2.0, 3.0]
        assert con.prompts == ["   a0 = ", "   a1 = ", "   a2 = "]

    @pytest.mark.parametrize("dimension,names", [
        (2, ["x", "y"]),
        (4, ["x1", "x2", "x3", "x4"]),
    ])
    def test_read_point_prompts(self, dimension, names):
        con = ScriptedConsole(*["0"] * dimension)
        assert read_point(dimension, con.input, con.print) == [0.0] * dimension
        assert con.prompts == [f"   {name} = " for name in names]


class TestFormatting:

    def test_entity_info(self, line):
        text = format_entity_info(line)
        assert "Type: Line (ID: 1)" in text
        assert "a0=0.0, a1=1.0, a2=1.0" in text
        assert "Status: valid" in text

    def test_entity_info_invalid(self, invalid_line):
        assert "Status: invalid" in format_entity_info(invalid_line)

    def test_entity_info_disposed(self, line):
        line.dispose()
        assert format_entity_info(line) == "Line (ID: 1) - disposed"

    def test_point_check_checked(self):
        result = PointCheckResult(
            entity_id=1, object_type="Line", status=STATUS_CHECKED,
            description="Line #1", contains=False, distance=1.23456789,
        )
        assert format_point_check(result, precision=3) == \
            "Line #1: DOES NOT BELONG\n  Distance: 1.235"

    def test_point_check_statuses(self):
        mismatch = PointCheckResult(
            entity_id=2, object_type="Hyperplane", status=STATUS_DIMENSION_MISMATCH,
            required_dimension=4,
        )
        disposed = PointCheckResult(entity_id=3, object_type="Line", status=STATUS_DISPOSED)
        error = PointCheckResult(
            entity_id=4, object_type="Line", status=STATUS_ERROR,
            description="Line #4", error="bad",
        )
        assert "requires 4D" in format_point_check(mismatch)
        assert format_point_check(disposed) == "Line #3: skipped (disposed)"
        assert format_point_check(error) == "Line #4: error - bad"

    def test_demonstration(self):
        report = DemonstrationReport(
            entity_id=1, object_type="Line", description="Line #1",
            is_valid=True, validation_message="Line is valid",
            coefficients=(0.0, 1.0, 1.0), probe_point=(0.0, 0.0),
            contains_probe=True, distance_to_probe=0.0,
            clone_id=2, clone_description="Line #2",
        )
        text = format_demonstration(report, precision=2)
        assert "distance_to_point(): 0.00" in text
        assert "clone: Line #2" in text

    def test_demonstration_error_and_skip(self):
        report = DemonstrationReport(
            entity_id=1, object_type="Line", description="Line #1",
            is_valid=False, coefficients=(0.0, 0.0, 0.0), probe_point=(0.0, 0.0),
            contains_probe=True, error="invalid",
        )
        assert "error: invalid" in format_demonstration(report)
        skipped = DemonstrationReport(entity_id=5, object_type="Hyperplane", skipped=True)
        assert format_demonstration(skipped) == "Hyperplane #5: skipped (disposed)"

    def test_statistics(self):
        text = format_statistics(CollectionStatistics(object_count=2, total_created=7, disposed_count=1))
        assert "Objects in collection: 2" in text
        assert "Total instances created: 7" in text
