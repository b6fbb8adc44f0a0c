"""Checks and helpers used when wiring a resolver into its controller."""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping

from remoteresolution.common import LABEL_KEY_RESOLVER_TYPE, Context
from remoteresolution.framework.interface import Resolver

_WORK_QUEUE_PREFIX = "TektonResolverFramework."


class MissingTypeSelectorError(ValueError):
    """A resolver's selector does not include the resolver-type label."""

    def __init__(self) -> None:
        super().__init__(
            "invalid resolver: minimum selector must include "
            f"{json.dumps(LABEL_KEY_RESOLVER_TYPE)}"
        )


def validate_resolver(ctx: Context, resolver: Resolver) -> Mapping[str, str]:
    """Return the resolver's selector, raising if it lacks a type label."""
    selector = resolver.get_selector(ctx)
    if not selector or not selector.get(LABEL_KEY_RESOLVER_TYPE):
        raise MissingTypeSelectorError()
    return selector


def filter_by_selector(selector: Mapping[str, str]) -> Callable[[Any], bool]:
    """Return a predicate accepting requests whose labels match ``selector``.

    Objects without a ``labels`` mapping, or with no labels, are rejected.
    """
    wanted = dict(selector or {})

    def matches(obj: Any) -> bool:
        labels = getattr(obj, "labels", None)
        if not isinstance(labels, Mapping) or not labels:
            return False
        return all(key in labels and labels[key] == value for key, value in wanted.items())

    return matches


def sanitize_resolver_name(name: str) -> str:
    """Strip slashes and spaces from a resolver name."""
    return name.replace("/", "").replace(" ", "")


def work_queue_name(ctx: Context, resolver: Resolver) -> str:
    """Return the work-queue name for a resolver's controller."""
    return _WORK_QUEUE_PREFIX + sanitize_resolver_name(resolver.get_name(ctx))