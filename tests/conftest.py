"""
Pytest configuration and fixtures for lingeom tests.
"""

import logging

import pytest

from lingeom.core import InstanceCounter
from lingeom.primitives import Hyperplane, Line
from lingeom.collection import GeometryCollection


@pytest.fixture
def counter():
    """Fresh id source so ids in a test start at 1."""
    return InstanceCounter()


@pytest.fixture
def line(counter):
    """x + y = 0"""
    return Line(0.0, 1.0, 1.0, counter=counter)


@pytest.fixture
def hyperplane(counter):
    """x1 + x2 + x3 + x4 = 0"""
    return Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0, counter=counter)


@pytest.fixture
def invalid_line(counter):
    """Default line, all coefficients zero."""
    return Line(counter=counter)


@pytest.fixture
def collection(counter):
    """Empty collection reporting totals from the test counter."""
    with GeometryCollection(counter=counter) as c:
        yield c


@pytest.fixture
def reset_lingeom_logger():
    """Undo setup_logging() side effects on the 'lingeom' logger."""
    yield
    logger = logging.getLogger("lingeom")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
