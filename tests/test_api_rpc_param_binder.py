from rpcgate.api.rpc.context_models import RpcRequest
from rpcgate.api.rpc.param_binder import bind_named_params, params_to_positional


def _request(params, version="2.0", method="add"):
    return RpcRequest(method=method, params=params, id=1, version=version)


def test_named_params_follow_declared_order(registry):
    request = bind_named_params(_request({"b": 2, "a": 1}), registry)
    assert request.params == [1, 2]


def test_absent_names_become_placeholders(registry):
    request = bind_named_params(_request({"b": 2}), registry)
    assert request.params == [None, 2]


def test_undeclared_keys_are_dropped(registry):
    request = bind_named_params(_request({"a": 1, "b": 2, "c": 3}), registry)
    assert request.params == [1, 2]


def test_positional_params_untouched(registry):
    request = bind_named_params(_request([5, 6]), registry)
    assert request.params == [5, 6]


def test_unknown_method_skips_binding(registry):
    request = bind_named_params(_request({"a": 1}, method="missing"), registry)
    assert request.params == {"a": 1}


def test_v1_request_is_never_rebound(registry):
    request = bind_named_params(_request({"a": 1, "b": 2}, version="1.0"), registry)
    assert request.params == {"a": 1, "b": 2}


def test_binding_rewrites_in_place(registry):
    request = _request({"a": 1, "b": 2})
    assert bind_named_params(request, registry) is request


def test_params_to_positional_empty_declaration():
    assert params_to_positional({"x": 1}, ()) == []
