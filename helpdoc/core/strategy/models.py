from __future__ import annotations

import json
from dataclasses import dataclass, field
from hashlib import sha256
from pathlib import Path
from typing import Any, Mapping

from ...extraction.stages.build.functions import FUNCTION_LIST_TAG
from ...extraction.stages.build.lua import QUALIFY_TAG_PATTERN
from ...extraction.stages.build.options import OPTION_PATTERN
from ...libs.providers.splitter import DEFAULT_CONTINUATION, FUNCTION_PATTERN


BUILDER_KINDS = frozenset({"functions", "lua", "options"})


def _as_path(v: Any, default: Path | None) -> Path | None:
    if v is None:
        return default
    if isinstance(v, Path):
        return v
    if isinstance(v, str):
        return Path(v)
    raise TypeError(f"expected path-like value, got {type(v).__name__}")


def _as_int(v: Any, default: int) -> int:
    if v is None:
        return default
    if isinstance(v, bool):
        raise TypeError("expected int, got bool")
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    raise TypeError(f"expected int-like value, got {type(v).__name__}")


def _as_str(d: Mapping[str, Any], key: str, default: str) -> str:
    v = d.get(key, default)
    if not isinstance(v, str):
        raise TypeError(f"{key} must be str, got {type(v).__name__}")
    return v


def _as_mapping(v: Any, key: str) -> Mapping[str, Any] | None:
    if v is not None and not isinstance(v, Mapping):
        raise TypeError(f"{key} must be mapping, got {type(v).__name__}")
    return v


@dataclass
class PathsSettings:
    # None: fall back to $VIMRUNTIME/doc at read time
    doc_dir: Path | None = None
    logs_dir: Path = Path("logs")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "PathsSettings":
        d = d or {}
        return cls(
            doc_dir=_as_path(d.get("doc_dir"), None),
            logs_dir=_as_path(d.get("logs_dir"), cls.logs_dir) or cls.logs_dir,
        )


@dataclass
class DefaultsSettings:
    strategy_config_id: str = "vim.default"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "DefaultsSettings":
        d = d or {}
        return cls(strategy_config_id=_as_str(d, "strategy_config_id", cls.strategy_config_id))


@dataclass
class ObservabilitySettings:
    trace_enabled: bool = True

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> "ObservabilitySettings":
        d = d or {}
        v = d.get("trace_enabled", cls.trace_enabled)
        if not isinstance(v, bool):
            raise TypeError(f"trace_enabled must be bool, got {type(v).__name__}")
        return cls(trace_enabled=v)


@dataclass
class Settings:
    paths: PathsSettings = field(default_factory=PathsSettings)
    defaults: DefaultsSettings = field(default_factory=DefaultsSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)

    # Keep the raw mapping for debugging; must be JSON-serializable.
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> "Settings":
        raw = dict(raw or {})
        return cls(
            paths=PathsSettings.from_dict(_as_mapping(raw.get("paths"), "paths")),
            defaults=DefaultsSettings.from_dict(_as_mapping(raw.get("defaults"), "defaults")),
            observability=ObservabilitySettings.from_dict(
                _as_mapping(raw.get("observability"), "observability")
            ),
            raw=raw,
        )


@dataclass
class CatalogConfig:
    """How one help document is segmented and turned into a catalog."""

    catalog: str
    document: str
    builder: str
    pattern: str
    continuation: str = DEFAULT_CONTINUATION
    context: int = 1
    function_list_tag: str = FUNCTION_LIST_TAG
    qualify_tag_pattern: str = QUALIFY_TAG_PATTERN

    @classmethod
    def from_dict(cls, catalog: str, d: Mapping[str, Any] | None) -> "CatalogConfig":
        base = DEFAULT_CATALOGS.get(catalog)
        d = d or {}
        if base is None and "builder" not in d:
            raise ValueError(f"catalog {catalog!r} must name a builder")

        builder = _as_str(d, "builder", base.builder if base else "")
        if builder not in BUILDER_KINDS:
            raise ValueError(f"unknown builder for catalog {catalog!r}: {builder!r}")

        pattern = _as_str(d, "pattern", base.pattern if base else "")
        if not pattern:
            raise ValueError(f"catalog {catalog!r} missing pattern")

        context = _as_int(d.get("context"), base.context if base else cls.context)
        if context < 0:
            raise ValueError(f"context must be non-negative for catalog {catalog!r}")

        return cls(
            catalog=catalog,
            document=_as_str(d, "document", base.document if base else catalog),
            builder=builder,
            pattern=pattern,
            continuation=_as_str(d, "continuation", base.continuation if base else cls.continuation),
            context=context,
            function_list_tag=_as_str(d, "function_list_tag", cls.function_list_tag),
            qualify_tag_pattern=_as_str(d, "qualify_tag_pattern", cls.qualify_tag_pattern),
        )


DEFAULT_CATALOGS: dict[str, CatalogConfig] = {
    "functions": CatalogConfig(
        catalog="functions", document="builtin", builder="functions", pattern=FUNCTION_PATTERN, context=2
    ),
    "lua": CatalogConfig(catalog="lua", document="lua", builder="lua", pattern=FUNCTION_PATTERN, context=2),
    "options": CatalogConfig(catalog="options", document="options", builder="options", pattern=OPTION_PATTERN),
}


@dataclass
class StrategyConfig:
    """Resolved strategy config that can drive factories."""

    strategy_id: str
    strategy_config_id: str
    providers: dict[str, Any]
    catalogs: dict[str, CatalogConfig] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, strategy_id: str, raw: Mapping[str, Any]) -> "StrategyConfig":
        if not isinstance(raw, Mapping):
            raise TypeError("strategy config must be a mapping")

        raw_dict = dict(raw)
        providers = raw_dict.get("providers")
        if not isinstance(providers, Mapping):
            raise TypeError("strategy config missing 'providers' mapping")

        catalogs_raw = _as_mapping(raw_dict.get("catalogs"), "catalogs") or {}
        catalogs = {name: cfg for name, cfg in DEFAULT_CATALOGS.items()}
        for name, value in catalogs_raw.items():
            catalogs[name] = CatalogConfig.from_dict(name, _as_mapping(value, f"catalogs.{name}"))

        return cls(
            strategy_id=strategy_id,
            strategy_config_id=_compute_strategy_config_id(raw_dict),
            providers={k: dict(v) if isinstance(v, Mapping) else v for k, v in providers.items()},
            catalogs=catalogs,
            raw=raw_dict,
        )

    def catalog(self, name: str) -> CatalogConfig:
        try:
            return self.catalogs[name]
        except KeyError as exc:
            known = ", ".join(sorted(self.catalogs))
            raise KeyError(f"unknown catalog {name!r} (known: {known})") from exc

    def to_factory_cfg(self) -> dict[str, Any]:
        return {"providers": self.providers}


def _compute_strategy_config_id(raw: Mapping[str, Any]) -> str:
    canonical = json.dumps(raw, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    digest = sha256(canonical.encode("utf-8")).hexdigest()
    return f"scfg_{digest}"
