# remoteresolution

Building blocks for resolving remote resources. A client submits a request
that names a resolver type and a set of string parameters. A resolver checks
those parameters, fetches the content, and returns it with any annotations.

## Installation

```
pip install remoteresolution
```

To run the test suite, install the `test` extra (`pip install "remoteresolution[test]"`)
and run `pytest`.

## Modules

### `remoteresolution.common`

- Constants: `ANNOTATION_KEY_CONTENT_TYPE`, `LABEL_KEY_RESOLVER_TYPE`,
  `MESSAGE_WAITING_FOR_RESOLVER`, and the reasons
  `REASON_RESOLUTION_IN_PROGRESS`, `REASON_RESOLUTION_SUCCESSFUL`,
  `REASON_RESOLUTION_FAILED` and `REASON_RESOLUTION_TIMED_OUT`.
- `Context` is an immutable bag of request-scoped values. `with_value`
  returns a new context and `value` returns a stored value or `None`.
- `inject_request_namespace(ctx, namespace)` stores the request namespace.
  It can be set only once, and later calls leave it unchanged.
  `request_namespace(ctx)` reads it back and returns `""` when it is unset.
- Errors:
  - `ResolutionError` carries a `reason` and an `original` error, and its
    message is the original's message.
  - `InvalidResourceKeyError`, `InvalidRequestError`, `GettingResourceError`
    and `UpdatingRequestError` cover the other failures.
  - `new_error(reason, err)` builds a `ResolutionError`.
  - `reason_error(err)` returns a `(reason, error)` pair. Any error that is
    not a `ResolutionError` gets `ResolutionFailed` as its reason.
  - `ERROR_REQUEST_IN_PROGRESS` marks a request that is still being worked on.

### `remoteresolution.names`

- `SimpleNameGenerator` keeps names within 63 characters:
  - `restrict_length_with_random_suffix(base)` cuts `base` to 57 characters
    and adds a dash and five random characters.
  - `restrict_length(base)` cuts `base` to 63 characters and strips any
    trailing non-alphanumeric characters. It raises `ValueError` when nothing
    alphanumeric is left.
- The generator takes an optional random source, for example
  `random.Random(seed)`, so that suffixes can be reproduced.
- `random_string(length, rng)` draws characters from `ALPHANUMS`.
- `SIMPLE_NAME_GENERATOR` is a shared instance.

### `remoteresolution.resource`

- `generate_deterministic_name(prefix, base, params)` returns
  `{prefix}-{hash}`. The hash is a 128-bit FNV-1a hash over the base and each
  parameter key and value, taken in sorted key order.
- `Request` is a protocol with `name`, `namespace` and `params`.
- `BasicRequest` is a frozen dataclass that satisfies `Request`.
- `ResolverName` is a distinct string type for resolver names.
- `Requester` is an abstract base with `submit(ctx, resolver, request)`.
- `ResolvedResource` is an abstract base with `data()` and `annotations()`.

### `remoteresolution.framework`

- `framework.interface` holds the interfaces:
  - `Resolver`, with `initialize`, `get_name`, `get_selector`,
    `validate_params` and `resolve`;
  - `ConfigWatcher`, with `get_config_name`;
  - `TimedResolution`, with `get_resolution_timeout`, in seconds;
  - `ResolvedResource`, with `data` and `annotations`.

  A class counts as implementing an interface when it defines the methods,
  whether or not it inherits from it.
- `framework.configstore` handles resolver configuration:
  - `data_from_config_map(config)` copies config data into a dict. It
    accepts `None`, a mapping, or an object with a `data` attribute.
  - `ConfigStore(name)` keeps the latest config for one resolver.
    `update(name, data)` ignores every name except its own.
    `get_resolver_config()` returns a copy, and `to_context(ctx)` returns a
    context that carries the config.
  - `inject_resolver_config_to_context(ctx, conf)` and
    `get_resolver_config_from_context(ctx)` store and read the config.
    Reading returns an empty dict when none is stored.
- `framework.fakeresolver` provides `FakeResolver` and `FakeResolvedResource`:
  - `FakeResolver` answers the `fake-key` parameter from a table of canned
    results.
  - `validate_params` raises `ValueError` when the parameter is missing or
    empty.
  - `resolve` raises `LookupError` for an unknown value. It raises
    `RuntimeError(error_with)` when the entry has `error_with` set.
    Otherwise it sleeps `wait_for` seconds and returns the entry.
  - `get_resolution_timeout` returns `timeout` when it is positive and the
    given default otherwise.
- `framework.controller` holds the controller helpers:
  - `validate_resolver(ctx, resolver)` returns the resolver's selector. It
    raises `MissingTypeSelectorError` when the selector has no
    resolver-type label.
  - `filter_by_selector(selector)` returns a predicate. The predicate accepts
    an object only if its `labels` contain every key and value of the
    selector.
  - `sanitize_resolver_name(name)` removes slashes and spaces.
  - `work_queue_name(ctx, resolver)` returns
    `"TektonResolverFramework." + sanitized name`.

## Example

```python
from remoteresolution.common import Context, inject_request_namespace, request_namespace
from remoteresolution.framework.controller import validate_resolver
from remoteresolution.framework.fakeresolver import FakeResolvedResource, FakeResolver

ctx = inject_request_namespace(Context(), "default")
assert request_namespace(ctx) == "default"

resolver = FakeResolver(for_param={"bar": FakeResolvedResource(content="some content")})
resolver.initialize(ctx)
validate_resolver(ctx, resolver)

params = {"fake-key": "bar"}
resolver.validate_params(ctx, params)
resource = resolver.resolve(ctx, params)
assert resource.data() == b"some content"
```

## What this package does not do

This package gives you the types, errors and helpers, but it does not talk to
a cluster or any other store of requests. In particular:

- There is no concrete `Requester`.
- There is no running controller, work queue or reconcile loop.
- Nothing writes request status or resolved data back anywhere.
- No command-line program is installed.

Wiring a `Resolver` to a real source of requests is left to the application.