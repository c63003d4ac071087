from __future__ import annotations

from typing import Any, Dict, Mapping

from ..registry import ProviderRegistry


def _extract_provider_cfg(cfg: Mapping[str, Any], kind: str) -> Dict[str, Any] | None:
    # Preferred shape: cfg["providers"][kind] = {provider_id, params}
    providers = cfg.get("providers")
    if isinstance(providers, Mapping) and kind in providers:
        value = providers[kind]
    elif kind in cfg:
        value = cfg[kind]
    else:
        return None

    if isinstance(value, str):
        return {"provider_id": value, "params": {}}
    if isinstance(value, Mapping):
        provider_id = value.get("provider_id") or value.get("id")
        params = value.get("params")
        if params is None:
            params = {k: v for k, v in value.items() if k not in {"provider_id", "id"}}
        return {"provider_id": provider_id, "params": dict(params)}
    raise TypeError(f"invalid provider config for kind={kind!r}")


def _create_provider(
    registry: ProviderRegistry,
    *,
    kind: str,
    cfg: Mapping[str, Any],
    default_id: str | None = None,
) -> Any:
    """Build the provider configured for `kind`, or `default_id` when unconfigured."""
    provider_cfg = _extract_provider_cfg(cfg, kind)
    if provider_cfg is None:
        if default_id is None:
            raise ValueError(f"missing provider config for kind={kind}")
        return registry.create(kind, default_id)

    provider_id = provider_cfg.get("provider_id") or default_id
    if not provider_id:
        raise ValueError(f"missing provider_id for kind={kind}")

    return registry.create(kind, provider_id, **provider_cfg.get("params", {}))
