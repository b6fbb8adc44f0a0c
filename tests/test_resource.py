import pytest

from remoteresolution.common import (
    ERROR_REQUEST_IN_PROGRESS,
    Context,
    ResolutionError,
    request_namespace,
)
from remoteresolution.resource import (
    BasicRequest,
    Request,
    Requester,
    ResolvedResource,
    ResolverName,
    generate_deterministic_name,
)


def test_empty_input_hashes_to_fnv128a_offset_basis():
    assert (
        generate_deterministic_name("p", "", {})
        == "p-6c62272e07bb014262b821756295c58d"
    )


def test_name_format():
    name = generate_deterministic_name("git", "base", {"url": "x", "path": "y"})
    assert name.startswith("git-")
    assert len(name) == len("git-") + 32
    assert set(name[len("git-"):]) <= set("0123456789abcdef")


def test_name_is_reproducible_and_order_independent():
    first = generate_deterministic_name("git", "base", {"a": "1", "b": "2"})
    second = generate_deterministic_name("git", "base", {"b": "2", "a": "1"})
    assert first == second


def test_params_are_concatenated_after_base():
    joined = generate_deterministic_name("p", "abc", {})
    split = generate_deterministic_name("p", "a", {"b": "c"})
    assert joined == split


def test_different_params_give_different_names():
    one = generate_deterministic_name("p", "base", {"k": "v1"})
    two = generate_deterministic_name("p", "base", {"k": "v2"})
    assert one.split("-", 1)[1] != two.split("-", 1)[1]
    assert one.startswith("p-") and two.startswith("p-")


def test_basic_request_fields():
    req = BasicRequest("rr", "foo", {"fake-key": "bar"})
    assert (req.name, req.namespace, req.params) == ("rr", "foo", {"fake-key": "bar"})
    assert isinstance(req, Request)


def test_basic_request_is_frozen():
    req = BasicRequest("rr", "foo")
    with pytest.raises(AttributeError):
        req.name = "other"
    assert req.name == "rr"
    assert req.namespace == "foo"


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Requester()
    with pytest.raises(TypeError):
        ResolvedResource()


class _StaticResource(ResolvedResource):
    def __init__(self, content):
        self._content = content

    def data(self):
        return self._content

    def annotations(self):
        return {"content-type": "text/plain"}


class _OnceRequester(Requester):
    def __init__(self):
        self.seen = set()

    def submit(self, ctx, resolver, request):
        key = (resolver, request.namespace, request.name)
        if key not in self.seen:
            self.seen.add(key)
            raise ERROR_REQUEST_IN_PROGRESS
        return _StaticResource(request.params["fake-key"].encode())


def test_requester_subclass_flow():
    requester = _OnceRequester()
    req = BasicRequest("rr", "foo", {"fake-key": "bar"})
    ctx = Context()
    with pytest.raises(ResolutionError) as info:
        requester.submit(ctx, ResolverName("fake"), req)
    assert info.value.reason == "RequestInProgress"
    resource = requester.submit(ctx, ResolverName("fake"), req)
    assert resource.data() == b"bar"
    assert request_namespace(ctx) == ""