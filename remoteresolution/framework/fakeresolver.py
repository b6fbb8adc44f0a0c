"""A resolver that serves pre-configured content, for tests and demos."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Mapping

from remoteresolution.common import LABEL_KEY_RESOLVER_TYPE, Context
from remoteresolution.framework.interface import (
    ResolvedResource,
    Resolver,
    TimedResolution,
)

# Value of the resolver-type label on requests for the fake resolver.
LABEL_VALUE_FAKE_RESOLVER_TYPE = "fake"

# Name the fake resolver is associated with.
FAKE_RESOLVER_NAME = "Fake"

# Name of the fake resolver's single parameter.
FAKE_PARAM_NAME = "fake-key"


@dataclass
class FakeResolvedResource(ResolvedResource):
    """Canned result for the fake resolver.

    When looked up, ``error_with`` (if set) is raised; otherwise the resolver
    waits ``wait_for`` seconds and returns this resource.
    """

    content: str = ""
    annotation_map: dict[str, str] | None = None
    error_with: str = ""
    wait_for: float = 0.0

    def data(self) -> bytes:
        """Return the content as bytes."""
        return self.content.encode()

    def annotations(self) -> dict[str, str] | None:
        """Return the annotation map."""
        return self.annotation_map


@dataclass
class FakeResolver(Resolver, TimedResolution):
    """Resolves the ``fake-key`` parameter against a table of canned results."""

    for_param: dict[str, FakeResolvedResource] | None = None
    timeout: float = 0.0

    def initialize(self, ctx: Context) -> None:
        """Make sure the result table exists."""
        if self.for_param is None:
            self.for_param = {}

    def get_name(self, ctx: Context) -> str:
        """Return the fake resolver's name."""
        return FAKE_RESOLVER_NAME

    def get_selector(self, ctx: Context) -> dict[str, str]:
        """Return the labels requests need to reach the fake resolver."""
        return {LABEL_KEY_RESOLVER_TYPE: LABEL_VALUE_FAKE_RESOLVER_TYPE}

    def validate_params(self, ctx: Context, params: Mapping[str, str] | None) -> None:
        """Raise ValueError if the required parameter is missing or empty."""
        required = [FAKE_PARAM_NAME]
        params = params or {}
        missing = [name for name in required if not params.get(name)]
        if missing:
            raise ValueError(f"missing {', '.join(missing)}")

    def resolve(self, ctx: Context, params: Mapping[str, str] | None) -> FakeResolvedResource:
        """Return the canned resource for the parameter value."""
        value = (params or {}).get(FAKE_PARAM_NAME, "")
        resource = (self.for_param or {}).get(value)
        if resource is None:
            raise LookupError(f"couldn't find resource for param value {value}")
        if resource.error_with:
            raise RuntimeError(resource.error_with)
        if resource.wait_for > 0:
            time.sleep(resource.wait_for)
        return resource

    def get_resolution_timeout(self, ctx: Context, default_timeout: float) -> float:
        """Return the configured timeout, or ``default_timeout`` if unset."""
        if self.timeout > 0:
            return self.timeout
        return default_timeout