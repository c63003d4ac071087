from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from .models import Settings, StrategyConfig


def _resolve_path(root: Path, p: Path) -> Path:
    p = Path(os.path.expandvars(str(p))).expanduser()
    return p if p.is_absolute() else (root / p).resolve()


def _load_yaml_mapping(p: Path) -> dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TypeError(f"{p.name}: root must be a mapping")
    return raw


def load_settings(path: str | Path) -> Settings:
    """
    Load `config/settings.yaml`.

    Relative paths resolve against the repository root (the parent of the
    `config/` directory); `$VARS` and `~` are expanded first.
    """
    p = Path(path).expanduser().resolve()
    root = p.parent.parent  # .../config/settings.yaml -> repo root

    s = Settings.from_dict(_load_yaml_mapping(p))

    if s.paths.doc_dir is not None:
        s.paths.doc_dir = _resolve_path(root, s.paths.doc_dir)
    s.paths.logs_dir = _resolve_path(root, s.paths.logs_dir)

    return s


class StrategyLoader:
    def __init__(self, root: Path | None = None) -> None:
        if root is None:
            # .../helpdoc/core/strategy/loader.py -> repo root
            root = Path(__file__).resolve().parents[3]
        self.root = root
        self.strategies_dir = self.root / "config" / "strategies"

    def load(self, strategy_config_id: str) -> StrategyConfig:
        path = self._resolve_strategy_path(strategy_config_id)
        raw = _load_yaml_mapping(path)
        return StrategyConfig.from_dict(strategy_config_id, raw)

    def _resolve_strategy_path(self, strategy_config_id: str) -> Path:
        p = Path(strategy_config_id)
        if p.suffix in {".yml", ".yaml"}:
            if p.is_absolute():
                return p
            return (self.root / p).resolve()

        for suffix in (".yaml", ".yml"):
            candidate = (self.strategies_dir / f"{strategy_config_id}{suffix}").resolve()
            if candidate.exists():
                return candidate
        raise FileNotFoundError(f"strategy config not found: {strategy_config_id}")
