import time

import pytest

from remoteresolution.common import LABEL_KEY_RESOLVER_TYPE, Context
from remoteresolution.framework.fakeresolver import (
    FAKE_PARAM_NAME,
    FAKE_RESOLVER_NAME,
    LABEL_VALUE_FAKE_RESOLVER_TYPE,
    FakeResolvedResource,
    FakeResolver,
)

CTX = Context()


def test_resource_data_and_annotations():
    res = FakeResolvedResource(content="some content", annotation_map={"foo": "bar"})
    assert res.data() == b"some content"
    assert res.annotations() == {"foo": "bar"}


def test_initialize_creates_table():
    resolver = FakeResolver()
    resolver.initialize(CTX)
    assert resolver.for_param == {}


def test_initialize_keeps_existing_table():
    table = {"bar": FakeResolvedResource(content="x")}
    resolver = FakeResolver(for_param=table)
    resolver.initialize(CTX)
    assert resolver.for_param is table


def test_name_and_selector():
    resolver = FakeResolver()
    assert resolver.get_name(CTX) == "Fake"
    assert resolver.get_selector(CTX) == {"resolution.tekton.dev/type": "fake"}


@pytest.mark.parametrize("params", [None, {}, {FAKE_PARAM_NAME: ""}, {"other": "x"}])
def test_validate_params_missing(params):
    with pytest.raises(ValueError, match=f"missing {FAKE_PARAM_NAME}"):
        FakeResolver().validate_params(CTX, params)


def test_validate_params_accepts_value():
    resolver = FakeResolver()
    resolver.validate_params(CTX, {FAKE_PARAM_NAME: "bar"})
    assert resolver.get_selector(CTX)[LABEL_KEY_RESOLVER_TYPE] == LABEL_VALUE_FAKE_RESOLVER_TYPE


def test_resolve_unknown_value():
    resolver = FakeResolver()
    with pytest.raises(LookupError, match="couldn't find resource for param value bar"):
        resolver.resolve(CTX, {FAKE_PARAM_NAME: "bar"})


def test_resolve_known_value():
    expected = FakeResolvedResource(content="some content", annotation_map={"foo": "bar"})
    resolver = FakeResolver(for_param={"bar": expected})
    got = resolver.resolve(CTX, {FAKE_PARAM_NAME: "bar"})
    assert got is expected
    assert got.data() == b"some content"


def test_resolve_error():
    resolver = FakeResolver(for_param={"bar": FakeResolvedResource(error_with="fake failure")})
    with pytest.raises(RuntimeError, match="fake failure"):
        resolver.resolve(CTX, {FAKE_PARAM_NAME: "bar"})


def test_resolve_waits():
    resolver = FakeResolver(for_param={"bar": FakeResolvedResource(content="c", wait_for=0.05)})
    start = time.monotonic()
    got = resolver.resolve(CTX, {FAKE_PARAM_NAME: "bar"})
    assert time.monotonic() - start >= 0.05
    assert got.data() == b"c"


def test_timeout_default_and_override():
    assert FakeResolver().get_resolution_timeout(CTX, 60.0) == 60.0
    assert FakeResolver(timeout=1.0).get_resolution_timeout(CTX, 60.0) == 1.0


def test_name_constant():
    assert FakeResolver().get_name(CTX) == FAKE_RESOLVER_NAME