"""
Configuration management for lingeom.

Provides the configuration used by the example and self-test scripts. The
geometric core never reads configuration.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Optional, Dict, Any, List
from pathlib import Path


@dataclass
class Config:
    """
    Configuration for the lingeom scripts.

    Attributes:
        # Logging
        log_level: Level name for the 'lingeom' logger ('DEBUG', 'INFO', ...)
        log_file: Optional path of a log file

        # Run stages
        run_self_test: Run the scripted self-test before the demo
        demonstrate: Run GeometryCollection.demonstrate()

        # Reporting
        float_precision: Digits after the decimal point for distances

        # Points checked against the collection
        check_points: List of points (2 or 4 coordinates each)
    """

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    # Run stages
    run_self_test: bool = True
    demonstrate: bool = True

    # Reporting
    float_precision: int = 6

    # Points checked against the collection
    check_points: List[List[float]] = field(
        default_factory=lambda: [[0.0, 0.0], [1.0, -1.0], [0.0, 0.0, 0.0, 0.0]]
    )

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'Config':
        """Build a Config; keys that are not fields are kept in `extra`."""
        names = {f.name for f in fields(cls)} - {'extra'}
        config = cls(**{k: v for k, v in values.items() if k in names})
        config.extra.update(values.get('extra', {}))
        config.extra.update({k: v for k, v in values.items() if k not in names and k != 'extra'})
        return config


def load_config(filepath: str) -> Config:
    """Read a Config from a JSON file written by save_config (or by hand)."""
    return Config.from_dict(json.loads(Path(filepath).read_text(encoding='utf-8')))


def save_config(config: Config, filepath: str) -> None:
    """Write `config` as indented JSON, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding='utf-8')
