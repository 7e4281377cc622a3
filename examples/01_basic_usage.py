"""
Example 01: Basic Usage

Demonstrates:
1. Creating lines and hyperplanes, including an invalid one
2. Handing them to a GeometryCollection that owns and disposes them
3. Running the interface demonstration and checking points in bulk
4. Plotting the 2-D lines with matplotlib

Usage:
    python examples/01_basic_usage.py [--config path/to/config.json] [--plot]
"""

import os
import sys

from lingeom import GeometryCollection, Hyperplane, Line
from lingeom.console import (
    SEPARATOR,
    format_demonstration,
    format_point_check,
    format_statistics,
)
from lingeom.selftest import run_self_tests
from lingeom.utils import Config, load_config, plot_lines, setup_logging

OUTPUT_DIR = os.path.join(os.path.dirname(__file__), "output")


def get_config() -> Config:
    """Load the config given with --config, or the defaults."""
    if '--config' in sys.argv:
        index = sys.argv.index('--config')
        return load_config(sys.argv[index + 1])
    return Config()


def main():
    """Run the basic usage demo."""
    config = get_config()
    setup_logging(config.log_level, config.log_file)

    print("=" * 60)
    print("lingeom: Lines and Hyperplanes")
    print("=" * 60)

    if config.run_self_test:
        summary = run_self_tests()
        print(f"\nSelf-test: {summary.passed} passed, {summary.failed} failed")

    with GeometryCollection() as collection:
        print("\n[1/4] Creating objects...")
        collection.add(Line(0.0, 1.0, 1.0))                 # x + y = 0
        collection.add(Line(-2.0, 0.0, 1.0))                # y = 2
        collection.add(Hyperplane(0.0, 1.0, 1.0, 1.0, 1.0))
        collection.add(Line())                              # invalid, kept

        # Scoped entity: disposed at the end of the block, then rejected
        with Line(1.0, 2.0, 3.0) as scratch:
            print(f"  Scratch: {scratch}")
        collection.add(scratch)

        for line in collection.list_objects():
            print(f"  {line}")

        if config.demonstrate:
            print("\n[2/4] Demonstrating the shared contract...")
            for report in collection.demonstrate():
                print(format_demonstration(report, config.float_precision))

        print("\n[3/4] Checking points...")
        for point in config.check_points:
            print(f"\n{SEPARATOR}\nPoint {tuple(point)}:")
            for result in collection.check_point(point):
                print(format_point_check(result, config.float_precision))

        print("\n[4/4] Statistics")
        print(format_statistics(collection.statistics()))

        if '--plot' in sys.argv:
            os.makedirs(OUTPUT_DIR, exist_ok=True)
            lines = [e for e in collection if isinstance(e, Line) and e.is_valid()]
            points = [p for p in config.check_points if len(p) == 2]
            fig, _ = plot_lines(lines, points=points or None, title='Collection lines')
            path = os.path.join(OUTPUT_DIR, '01_lines.png')
            fig.savefig(path)
            print(f"\n  Saved: {path}")

    print("\n" + "=" * 60)
    print("Done.")
    print("=" * 60)


if __name__ == "__main__":
    main()
