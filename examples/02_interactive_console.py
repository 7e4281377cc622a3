"""
Example 02: Interactive Console

Reads the coefficients of one line and one hyperplane from the keyboard,
demonstrates the shared contract on both, then checks as many user-entered
points as requested.
"""

from lingeom import GeometricEntity, GeometryCollection, Hyperplane, Line
from lingeom.console import (
    SEPARATOR,
    format_demonstration,
    format_entity_info,
    format_point_check,
    format_statistics,
    read_coefficients,
    read_dimension,
    read_int,
    read_point,
)
from lingeom.core import GeometryError
from lingeom.selftest import run_self_tests
from lingeom.utils import setup_logging


def create_objects(collection: GeometryCollection) -> None:
    """Read one Line and one Hyperplane and hand them to the collection."""
    print("\nCreating a Line (2D):")
    line = Line()
    line.set_coefficients(read_coefficients(line.num_coefficients, "line"))
    collection.add(line)
    print(format_entity_info(line))

    print("\nCreating a Hyperplane (4D):")
    plane = Hyperplane()
    plane.set_coefficients(read_coefficients(plane.num_coefficients, "hyperplane"))
    collection.add(plane)
    print(format_entity_info(plane))


def check_points_loop(collection: GeometryCollection) -> None:
    count = read_int("\nNumber of points to check: ", min_value=0)
    for i in range(count):
        print(f"\n{SEPARATOR}\nPoint #{i + 1}:")
        dimension = read_dimension("Dimension (2 or 4): ")
        point = read_point(dimension)
        for result in collection.check_point(point):
            print(format_point_check(result))


def main():
    setup_logging('WARNING')

    summary = run_self_tests()
    print(f"Self-test: {summary.passed} passed, {summary.failed} failed, {summary.total} total")

    try:
        with GeometryCollection() as collection:
            print("\nSTAGE 1: Creating objects")
            create_objects(collection)

            print("\nSTAGE 2: Interface demonstration")
            for report in collection.demonstrate():
                print(format_demonstration(report))

            print("\nSTAGE 3: Point checks")
            check_points_loop(collection)

            print("\nSTAGE 4: Statistics")
            print(format_statistics(collection.statistics()))
            print(f"   Total entities ever created: {GeometricEntity.total_created()}")
    except GeometryError as e:
        print(f"\nError: {e}")

    print("\nDone.")


if __name__ == "__main__":
    main()
