"""
Scripted self-test runner.

Runs a fixed set of checks against the public API and reports pass/fail
counts. Meant for a quick smoke test from the command line; the full suite
lives in tests/.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .core.constants import EPSILON
from .core.counter import InstanceCounter
from .primitives import Hyperplane, Line

logger = logging.getLogger(__name__)


@dataclass
class SelfTestResult:
    name: str
    passed: bool
    message: str = ""


@dataclass
class SelfTestSummary:
    results: List[SelfTestResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.passed)

    @property
    def total(self) -> int:
        return len(self.results)


def _expect(condition: bool, message: str) -> None:
    """Raise AssertionError(message) unless condition holds, even under -O."""
    if not condition:
        raise AssertionError(message)


def _check_line_contains(counter: Optional[InstanceCounter]) -> None:
    with Line(0.0, 1.0, 1.0, counter=counter) as line:  # x + y = 0
        _expect(line.contains_point([1.0, -1.0]), "(1, -1) should lie on x + y = 0")


def _check_line_distance(counter: Optional[InstanceCounter]) -> None:
    with Line(0.0, 1.0, 0.0, counter=counter) as line:  # x = 0
        distance = line.distance_to_point([5.0, 0.0])
        _expect(abs(distance - 5.0) < EPSILON, f"expected distance 5, got {distance}")


def _check_similar_lines(counter: Optional[InstanceCounter]) -> None:
    with Line(1.0, 2.0, 3.0, counter=counter) as a, Line(2.0, 4.0, 6.0, counter=counter) as b:
        _expect(a.is_similar(b), "lines with doubled coefficients should be similar")


def _check_dissimilar_lines(counter: Optional[InstanceCounter]) -> None:
    with Line(1.0, 2.0, 3.0, counter=counter) as a, Line(1.0, 1.0, 1.0, counter=counter) as b:
        _expect(not a.is_similar(b), "lines should not be similar")


def _check_similar_with_zeros(counter: Optional[InstanceCounter]) -> None:
    with Line(0.0, 1.0, 0.0, counter=counter) as a, Line(0.0, 2.0, 0.0, counter=counter) as b:
        _expect(a.is_similar(b), "lines with zero a0 and a2 should be similar")


def _check_hyperplane_contains(counter: Optional[InstanceCounter]) -> None:
    with Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0, counter=counter) as plane:
        _expect(plane.contains_point([1.0, -1.0, 0.0, 0.0]), "point should lie on the hyperplane")


def _check_deep_clone(counter: Optional[InstanceCounter]) -> None:
    with Line(1.0, 2.0, 3.0, counter=counter) as original:
        with original.clone() as clone:
            _expect(clone.get_coefficients() == original.get_coefficients(),
                    "clone has different coefficients")
            original.set_coefficients([10.0, 20.0, 30.0])
            _expect(clone.get_coefficients() == (1.0, 2.0, 3.0),
                    "clone changed together with the original")
            _expect(clone.id != original.id, "clone should have a new id")


SELF_TESTS: List[Tuple[str, Callable[[Optional[InstanceCounter]], None]]] = [
    ("contains_point for a line", _check_line_contains),
    ("distance_to_point for a line", _check_line_distance),
    ("is_similar for proportional lines", _check_similar_lines),
    ("is_similar for non-proportional lines", _check_dissimilar_lines),
    ("is_similar with zero coefficients", _check_similar_with_zeros),
    ("contains_point for a hyperplane", _check_hyperplane_contains),
    ("deep clone", _check_deep_clone),
]


def run_self_tests(counter: Optional[InstanceCounter] = None) -> SelfTestSummary:
    """
    Run every check in SELF_TESTS.

    A failing check never stops the run; its message is recorded instead.

    Args:
        counter: Id source for the entities the checks create

    Returns:
        SelfTestSummary with one result per check
    """
    summary = SelfTestSummary()

    for index, (name, check) in enumerate(SELF_TESTS, start=1):
        try:
            check(counter)
        except Exception as e:
            logger.error(f"Test {index} FAILED: {name}: {e}")
            summary.results.append(SelfTestResult(name=name, passed=False, message=str(e)))
        else:
            logger.info(f"Test {index} PASSED: {name}")
            summary.results.append(SelfTestResult(name=name, passed=True))

    logger.info(f"Self-test: {summary.passed} passed, {summary.failed} failed, {summary.total} total")
    return summary
