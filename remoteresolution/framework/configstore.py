"""Resolver configuration storage and its request-scoped context helpers."""

from __future__ import annotations

import threading
from typing import Any, Mapping

from remoteresolution.common import Context

# Context key under which one resolver's configuration is stored.
_RESOLVER_CONFIG_KEY = object()


def data_from_config_map(config: Any) -> dict[str, str]:
    """Return a copy of a config map's data, or an empty dict.

    ``config`` may be None, a mapping of the data itself, or an object with
    a ``data`` attribute that is a mapping or None.
    """
    if config is None:
        return {}
    data = config if isinstance(config, Mapping) else getattr(config, "data", None)
    if data is None:
        return {}
    return dict(data)


class ConfigStore:
    """Holds the latest configuration for one resolver."""

    def __init__(self, resolver_config_name: str) -> None:
        self.resolver_config_name = resolver_config_name
        self._lock = threading.Lock()
        self._configs: dict[str, dict[str, str]] = {}

    def update(self, name: str, data: Any) -> None:
        """Record new contents for the config named ``name``.

        Configs other than the resolver's own are ignored.
        """
        if name != self.resolver_config_name:
            return
        converted = data_from_config_map(data)
        with self._lock:
            self._configs[name] = converted

    def get_resolver_config(self) -> dict[str, str]:
        """Return a copy of the resolver's configuration, or an empty dict."""
        with self._lock:
            stored = self._configs.get(self.resolver_config_name)
        return dict(stored) if isinstance(stored, dict) else {}

    def to_context(self, ctx: Context) -> Context:
        """Return a new context carrying the resolver's configuration."""
        return inject_resolver_config_to_context(ctx, self.get_resolver_config())


def inject_resolver_config_to_context(ctx: Context, conf: Mapping[str, str]) -> Context:
    """Return a new context with ``conf`` stored as the resolver config."""
    return ctx.with_value(_RESOLVER_CONFIG_KEY, conf)


def get_resolver_config_from_context(ctx: Context) -> Mapping[str, str]:
    """Return the resolver configuration stored in ``ctx``, or an empty dict."""
    stored = ctx.value(_RESOLVER_CONFIG_KEY)
    if isinstance(stored, Mapping):
        return stored
    return {}