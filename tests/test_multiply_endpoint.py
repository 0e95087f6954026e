import json

import azure.functions as func
import pytest

import MultiUnitMultiplication as endpoint

URL = "/api/MultiUnitMultiplication"


def _request(body) -> func.HttpRequest:
    raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return func.HttpRequest(method="POST", url=URL, body=raw,
                            headers={"Content-Type": "application/json"})


def _call(body):
    resp = endpoint.main(_request(body))
    return resp.status_code, json.loads(resp.get_body())


@pytest.mark.parametrize("algorithm", ["strassen", "recursive"])
def test_multiplies(algorithm):
    status, payload = _call({
        "matrix_a": [[1, 2], [3, 4]],
        "matrix_b": [[5, 6], [7, 8]],
        "algorithm": algorithm,
    })
    assert status == 200
    assert payload == {"result": [[19, 22], [43, 50]], "algorithm": algorithm, "size": 2}


def test_defaults_to_strassen():
    status, payload = _call({"matrix_a": [[7]], "matrix_b": [[6]]})
    assert status == 200
    assert payload["algorithm"] == "strassen"
    assert payload["result"] == [[42]]


@pytest.mark.parametrize("body", [
    {"matrix_a": [[1, 2], [3, 4]]},
    {"matrix_a": [[1, 2], [3, 4]], "matrix_b": [[1]]},
    {"matrix_a": [[1, 2, 3]] * 3, "matrix_b": [[1, 2, 3]] * 3},
    {"matrix_a": [[1, 2], [3]], "matrix_b": [[1, 2], [3, 4]]},
    {"matrix_a": [[1.5]], "matrix_b": [[1]]},
    {"matrix_a": [[1]], "matrix_b": [[1]], "algorithm": "winograd"},
    [1, 2, 3],
])
def test_rejects_bad_input(body):
    status, payload = _call(body)
    assert status == 400
    assert "error" in payload


def test_rejects_values_outside_int64():
    status, payload = _call({"matrix_a": [[2**70]], "matrix_b": [[1]]})
    assert status == 400
    assert "int64" in payload["error"]


def test_rejects_non_json():
    status, payload = _call(b"not json")
    assert status == 400
    assert "error" in payload


def test_rejects_oversized(monkeypatch):
    monkeypatch.setattr(endpoint, "MAX_DIM", 2)
    status, payload = _call({"matrix_a": [[0] * 4] * 4, "matrix_b": [[0] * 4] * 4})
    assert status == 400
    assert "limit" in payload["error"]


def test_unexpected_failure_is_500(monkeypatch):
    def boom(A, B):
        raise RuntimeError("kaput")
    monkeypatch.setitem(endpoint.ALGORITHMS, "recursive", boom)
    status, payload = _call({"matrix_a": [[1]], "matrix_b": [[1]], "algorithm": "recursive"})
    assert status == 500
    assert payload == {"error": "kaput"}


def test_logs_one_json_line(caplog):
    with caplog.at_level("INFO", logger="multiply"):
        _call({"matrix_a": [[1]], "matrix_b": [[2]]})
    records = [json.loads(r.getMessage()) for r in caplog.records if r.name == "multiply"]
    assert len(records) == 1
    assert records[0]["success"] is True
    assert records[0]["N"] == 1
    assert records[0]["algorithm"] == "strassen"
