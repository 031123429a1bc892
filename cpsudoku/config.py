from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

ENV_CONFIG = "CPSUDOKU_CONFIG"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


@dataclass
class SolverSettings:
    verbose: bool = False
    max_attempts: int = 0  # generator retries; 0 = retry until success
    seed: int | None = None
    report_every_secs: float = 60.0
    report_every_nodes: int = 0

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        if self.report_every_secs <= 0:
            raise ValueError("report_every_secs must be > 0")


def load_settings(path: str | Path | None = None, **overrides) -> SolverSettings:
    """Build settings from an optional YAML file (or $CPSUDOKU_CONFIG) plus overrides.

    Overrides set to None are ignored so argparse defaults do not mask the file.
    """
    if path is None:
        path = os.environ.get(ENV_CONFIG) or None
    cfg: Dict[str, Any] = dict(load_yaml(path)) if path else {}
    merge_overrides(cfg, **overrides)
    known = {f.name for f in fields(SolverSettings)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    return SolverSettings(**cfg)
