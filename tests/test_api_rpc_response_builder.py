import json

import pytest

from rpcgate.api.rpc.error_catalog import INTERNAL_ERROR, METHOD_NOT_FOUND
from rpcgate.api.rpc.response_builder import build_error_response, build_response


def test_v2_success_has_result_only():
    assert build_response("2.0", result="hi", req_id=7) == {"jsonrpc": "2.0", "result": "hi", "id": 7}


def test_v2_error_has_error_only():
    env = build_error_response("2.0", METHOD_NOT_FOUND, req_id="a")
    assert env == {"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found."}, "id": "a"}
    assert "result" not in env


def test_v2_null_result_is_still_present():
    env = build_response("2.0", result=None, req_id=1)
    assert "result" in env and env["result"] is None
    assert "error" not in env


def test_v1_always_carries_both_keys():
    assert build_response("1.0", result=3, req_id=1) == {"result": 3, "error": None, "id": 1}
    env = build_error_response("1.0", INTERNAL_ERROR, req_id=1)
    assert env == {"result": None, "error": {"code": -32603, "message": "Internal error."}, "id": 1}
    assert "jsonrpc" not in env


def test_v1_keeps_falsy_results_and_ids():
    assert build_response("1.0", result=0, req_id=0) == {"result": 0, "error": None, "id": 0}


def test_missing_id_degrades_to_null():
    assert build_response("2.0", result=1)["id"] is None
    assert build_response("1.0", result=1)["id"] is None


@pytest.mark.parametrize("version", ["1.0", "2.0"])
@pytest.mark.parametrize(("result", "req_id"), [({"a": [1, 2]}, 5), ("text", "abc"), (False, None)])
def test_round_trip_recovers_result_and_id(version, result, req_id):
    parsed = json.loads(json.dumps(build_response(version, result, None, req_id)))
    assert parsed["result"] == result
    assert parsed["id"] == req_id
