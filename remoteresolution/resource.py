"""Requests for remote resources and the results they produce."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Mapping, NewType, Protocol, runtime_checkable

from remoteresolution.common import Context

ResolverName = NewType("ResolverName", str)

_FNV128_OFFSET_BASIS = 0x6C62272E07BB014262B821756295C58D
_FNV128_PRIME = 0x0000000001000000000000000000013B
_MASK_128 = (1 << 128) - 1


def _fnv128a(chunks) -> int:
    value = _FNV128_OFFSET_BASIS
    for chunk in chunks:
        for byte in chunk:
            value = ((value ^ byte) * _FNV128_PRIME) & _MASK_128
    return value


def generate_deterministic_name(prefix: str, base: str, params: Mapping[str, str]) -> str:
    """Return a reproducible name of the form ``{prefix}-{hash}``.

    The hash is FNV-1a 128 over ``base`` followed by each parameter key and
    value, with keys taken in sorted order.
    """
    chunks = [base.encode()]
    for key in sorted(params):
        chunks.append(key.encode())
        chunks.append(params[key].encode())
    return f"{prefix}-{_fnv128a(chunks):032x}"


@runtime_checkable
class Request(Protocol):
    """A single request for a remote resource."""

    @property
    def name(self) -> str: ...

    @property
    def namespace(self) -> str: ...

    @property
    def params(self) -> Mapping[str, str]: ...


@dataclass(frozen=True)
class BasicRequest:
    """The fields needed to submit a new resource request."""

    name: str
    namespace: str
    params: Mapping[str, str] = field(default_factory=dict)


class ResolvedResource(abc.ABC):
    """Read-only view of the data and metadata of a resolved resource."""

    @abc.abstractmethod
    def data(self) -> bytes:
        """Return the resource's content; raise if it cannot be read."""

    @abc.abstractmethod
    def annotations(self) -> dict[str, str] | None:
        """Return the annotations that came with the resource."""


class Requester(abc.ABC):
    """Knows how to submit requests for remote resources."""

    @abc.abstractmethod
    def submit(
        self, ctx: Context, resolver: ResolverName, request: Request
    ) -> ResolvedResource:
        """Submit ``request`` to the named resolver and return the result.

        Raises an error while the request is in progress or has failed.
        """