"""Shared primitives for remote resource resolution.

This module holds the constants, errors and request-scoped context helpers
that resolvers and clients both need, independent of how either is built.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Hashable, Mapping

# Annotation key passed back with a resolved resource's content type.
ANNOTATION_KEY_CONTENT_TYPE = "content-type"

# Label that determines which resolver ultimately receives a request.
LABEL_KEY_RESOLVER_TYPE = "resolution.tekton.dev/type"

# Message shown while no resolver has answered or rejected a request.
MESSAGE_WAITING_FOR_RESOLVER = "waiting for resolver"

# Processing reasons.
REASON_RESOLUTION_IN_PROGRESS = "ResolutionInProgress"

# Happy reasons.
REASON_RESOLUTION_SUCCESSFUL = "ResolutionSuccessful"

# Unhappy reasons.
REASON_RESOLUTION_FAILED = "ResolutionFailed"
REASON_RESOLUTION_TIMED_OUT = "ResolutionTimedOut"


class Context:
    """An immutable bag of request-scoped values.

    Deriving a context with :meth:`with_value` never changes the original.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[Hashable, Any] | None = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    def with_value(self, key: Hashable, value: Any) -> "Context":
        """Return a new context holding ``value`` under ``key``."""
        return Context({**self._values, key: value})

    def value(self, key: Hashable) -> Any:
        """Return the value stored under ``key``, or None."""
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"Context({dict(self._values)!r})"


_REQUEST_NAMESPACE_KEY = object()


def inject_request_namespace(ctx: Context, namespace: str) -> Context:
    """Return a context carrying the request namespace.

    The namespace may be set only once; later calls on the same or a
    derived context leave it unchanged.
    """
    if ctx.value(_REQUEST_NAMESPACE_KEY) is not None:
        return ctx
    return ctx.with_value(_REQUEST_NAMESPACE_KEY, namespace)


def request_namespace(ctx: Context) -> str:
    """Return the namespace of the request being processed, or ``""``."""
    value = ctx.value(_REQUEST_NAMESPACE_KEY)
    return value if isinstance(value, str) else ""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class ResolutionError(Exception):
    """A resolution failure carrying a short machine-readable reason."""

    def __init__(self, reason: str, original: BaseException) -> None:
        super().__init__(str(original))
        self.reason = reason
        self.original = original
        self.__cause__ = original

    def __str__(self) -> str:
        return str(self.original)


def new_error(reason: str, err: BaseException) -> ResolutionError:
    """Return a :class:`ResolutionError` with the given reason and cause."""
    return ResolutionError(reason, err)


ERROR_REQUEST_IN_PROGRESS = new_error(
    "RequestInProgress", Exception("Resource request is still in-progress")
)


class InvalidResourceKeyError(Exception):
    """A key is not of the form ``name`` or ``namespace/name``."""

    def __init__(self, key: str, original: BaseException) -> None:
        self.key = key
        self.original = original
        super().__init__(f"invalid resource key {_quote(key)}: {original}")
        self.__cause__ = original


class InvalidRequestError(Exception):
    """A resource request is badly formed."""

    def __init__(self, resolution_request_key: str, message: str) -> None:
        self.resolution_request_key = resolution_request_key
        self.message = message
        super().__init__(
            f"invalid resource request {_quote(resolution_request_key)}: {message}"
        )


class GettingResourceError(Exception):
    """Fetching a resource failed during an otherwise valid request."""

    def __init__(self, resolver_name: str, key: str, original: BaseException) -> None:
        self.resolver_name = resolver_name
        self.key = key
        self.original = original
        super().__init__(
            f"error getting {_quote(resolver_name)} {_quote(key)}: {original}"
        )
        self.__cause__ = original


class UpdatingRequestError(Exception):
    """Updating a resolution request, e.g. with resolved data, failed."""

    def __init__(self, resolution_request_key: str, original: BaseException) -> None:
        self.resolution_request_key = resolution_request_key
        self.original = original
        super().__init__(
            "error updating resource request "
            f"{_quote(resolution_request_key)} with data: {original}"
        )
        self.__cause__ = original


def reason_error(err: BaseException) -> tuple[str, BaseException]:
    """Split an error into its reason and underlying error.

    Errors that are not :class:`ResolutionError` get the generic
    ``ResolutionFailed`` reason and are returned unchanged.
    """
    if isinstance(err, ResolutionError):
        return err.reason, err.original
    return REASON_RESOLUTION_FAILED, err