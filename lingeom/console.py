"""
Text console helpers.

Reading numbers typed by a user and turning entity/collection results into
report text. Every reader takes `input_fn` / `output_fn` so it can be driven
by scripts and tests as well as by a terminal.
"""

from typing import Callable, List, Optional

from .collection.types import (
    CollectionStatistics,
    DemonstrationReport,
    PointCheckResult,
    STATUS_DIMENSION_MISMATCH,
    STATUS_DISPOSED,
    STATUS_ERROR,
)
from .core.base import GeometricEntity
from .core.constants import SUPPORTED_DIMENSIONS

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

SEPARATOR = "-" * 60


# =============================================================================
# Input
# =============================================================================

def read_float(prompt: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> float:
    """Prompt until the user enters a real number ('.' as decimal separator)."""
    while True:
        text = input_fn(prompt)
        try:
            return float(text.strip())
        except ValueError:
            output_fn("Error: enter a valid number (use '.' as the decimal separator).")


def read_int(
    prompt: str,
    min_value: Optional[int] = None,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> int:
    """Prompt until the user enters an integer >= min_value."""
    while True:
        text = input_fn(prompt)
        try:
            value = int(text.strip())
        except ValueError:
            value = None

        if value is not None and (min_value is None or value >= min_value):
            return value

        if min_value is None:
            output_fn("Error: enter a valid integer.")
        else:
            output_fn(f"Error: enter a valid integer (minimum {min_value}).")


def read_dimension(prompt: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """Prompt until the user enters a supported dimension (2 or 4)."""
    while True:
        text = input_fn(prompt)
        try:
            value = int(text.strip())
        except ValueError:
            value = None

        if value in SUPPORTED_DIMENSIONS:
            return value

        output_fn("Error: only dimensions 2 and 4 are supported.")


def read_coefficients(
    count: int,
    type_name: str,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> List[float]:
    """Read `count` coefficients a0..a{count-1}."""
    names = ", ".join(f"a{i}" for i in range(count))
    output_fn(f"Enter {count} coefficients for the {type_name} ({names}):")
    return [read_float(f"   a{i} = ", input_fn, output_fn) for i in range(count)]


def read_point(dimension: int, input_fn: InputFn = input, output_fn: OutputFn = print) -> List[float]:
    """Read point coordinates: x, y in 2-D, x1..xn otherwise."""
    output_fn(f"Enter point coordinates ({dimension}D):")
    if dimension == 2:
        names = ["x", "y"]
    else:
        names = [f"x{i + 1}" for i in range(dimension)]
    return [read_float(f"   {name} = ", input_fn, output_fn) for name in names]


# =============================================================================
# Reports
# =============================================================================

def format_entity_info(entity: GeometricEntity) -> str:
    """Multi-line summary of one entity."""
    if entity.disposed:
        return f"{entity.object_type} (ID: {entity.id}) - disposed"

    status = "valid" if entity.is_valid() else "invalid"
    coeffs = ", ".join(f"a{i}={a}" for i, a in enumerate(entity.get_coefficients()))
    return "\n".join([
        f"Type: {entity.object_type} (ID: {entity.id})",
        f"  Equation: {entity.equation()}",
        f"  Coefficients: {coeffs}",
        f"  Dimension: {entity.dimension}D",
        f"  Status: {status}",
    ])


def format_point_check(result: PointCheckResult, precision: int = 6) -> str:
    """One or two lines describing a PointCheckResult."""
    if result.status == STATUS_DISPOSED:
        return f"{result.object_type} #{result.entity_id}: skipped (disposed)"
    if result.status == STATUS_DIMENSION_MISMATCH:
        return (
            f"{result.object_type} #{result.entity_id}: dimension mismatch "
            f"(requires {result.required_dimension}D)"
        )
    if result.status == STATUS_ERROR:
        return f"{result.description}: error - {result.error}"

    belongs = "BELONGS" if result.contains else "DOES NOT BELONG"
    return f"{result.description}: {belongs}\n  Distance: {result.distance:.{precision}f}"


def format_demonstration(report: DemonstrationReport, precision: int = 6) -> str:
    """Multi-line description of a DemonstrationReport."""
    if report.skipped:
        return f"{report.object_type} #{report.entity_id}: skipped (disposed)"

    lines = [
        SEPARATOR,
        f"Object: {report.description}",
        "Validation:",
        f"   is_valid(): {report.is_valid}",
        f"   message: {report.validation_message}",
        "Coefficients:",
        f"   [{', '.join(str(a) for a in report.coefficients or ())}]",
        "Distance:",
        f"   point ({', '.join(str(c) for c in report.probe_point or ())}):",
        f"   contains_point(): {report.contains_probe}",
    ]
    if report.error is not None:
        lines.append(f"   error: {report.error}")
    else:
        lines.append(f"   distance_to_point(): {report.distance_to_probe:.{precision}f}")
    lines += [
        "Clone:",
        f"   original: {report.description}",
        f"   clone: {report.clone_description}",
    ]
    return "\n".join(lines)


def format_statistics(stats: CollectionStatistics) -> str:
    return "\n".join([
        "Statistics:",
        f"   Objects in collection: {stats.object_count}",
        f"   Disposed objects in collection: {stats.disposed_count}",
        f"   Total instances created: {stats.total_created}",
    ])
