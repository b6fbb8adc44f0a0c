"""Interfaces that resolvers implement.

Classes count as implementing an interface when they define its methods,
whether or not they inherit from it.
"""

from __future__ import annotations

import abc
from typing import Mapping

from remoteresolution.common import Context


def _implements(candidate: type, *names: str):
    for name in names:
        for base in candidate.__mro__:
            if name in base.__dict__:
                if base.__dict__[name] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class Resolver(abc.ABC):
    """Fetches resources of one type from a remote location."""

    _methods = ("initialize", "get_name", "get_selector", "validate_params", "resolve")

    @classmethod
    def __subclasshook__(cls, candidate):
        if cls is Resolver:
            return _implements(candidate, *cls._methods)
        return NotImplemented

    @abc.abstractmethod
    def initialize(self, ctx: Context) -> None:
        """Prepare the resolver when its controller is created."""

    @abc.abstractmethod
    def get_name(self, ctx: Context) -> str:
        """Return the resolver's name, e.g. ``"Git"``."""

    @abc.abstractmethod
    def get_selector(self, ctx: Context) -> Mapping[str, str]:
        """Return the labels that direct requests to this resolver."""

    @abc.abstractmethod
    def validate_params(self, ctx: Context, params: Mapping[str, str] | None) -> None:
        """Raise if any request parameter is missing or invalid."""

    @abc.abstractmethod
    def resolve(self, ctx: Context, params: Mapping[str, str] | None) -> "ResolvedResource":
        """Return the resolved resource or raise on failure."""


class ConfigWatcher(abc.ABC):
    """A resolver that takes additional configuration from an admin."""

    @classmethod
    def __subclasshook__(cls, candidate):
        if cls is ConfigWatcher:
            return _implements(candidate, "get_config_name")
        return NotImplemented

    @abc.abstractmethod
    def get_config_name(self, ctx: Context) -> str:
        """Return the name of the config map holding the configuration."""


class TimedResolution(abc.ABC):
    """A resolver that overrides the default resolution timeout."""

    @classmethod
    def __subclasshook__(cls, candidate):
        if cls is TimedResolution:
            return _implements(candidate, "get_resolution_timeout")
        return NotImplemented

    @abc.abstractmethod
    def get_resolution_timeout(self, ctx: Context, default_timeout: float) -> float:
        """Return the maximum duration in seconds of one request."""


class ResolvedResource(abc.ABC):
    """The data and annotations of a successful resource fetch."""

    @classmethod
    def __subclasshook__(cls, candidate):
        if cls is ResolvedResource:
            return _implements(candidate, "data", "annotations")
        return NotImplemented

    @abc.abstractmethod
    def data(self) -> bytes:
        """Return the resource's content."""

    @abc.abstractmethod
    def annotations(self) -> Mapping[str, str] | None:
        """Return the annotations to include in the response."""