import azure.functions as func
import json
import os
import time
import uuid

from strassen_algo import Matrix, get_logger, multiply, strassen, validate_matrices

# App settings (can override in Azure)
STRASSEN_THRESHOLD = int(os.getenv("STRASSEN_THRESHOLD", "1"))   # crossover to recursive multiply
MAX_DIM            = int(os.getenv("MAX_DIM", "256"))            # largest accepted side

ALGORITHMS = {
    "strassen": lambda A, B: strassen(A, B, threshold=STRASSEN_THRESHOLD),
    "recursive": multiply,
}


def _logger():
    return get_logger("multiply")


def jlog(rec: dict):
    base = {"ts": time.time(), "op": "multiply"}
    base.update(rec)
    base.setdefault("success", True)
    _logger().info(json.dumps(base, ensure_ascii=False))


def _json_response(payload: dict, status_code: int) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(payload), status_code=status_code,
                             mimetype="application/json")


def main(req: func.HttpRequest) -> func.HttpResponse:
    run_id = f"run_{uuid.uuid4().hex[:8]}"
    t0 = time.time()
    try:
        try:
            req_body = req.get_json()
        except ValueError:
            raise ValueError("Request body must be JSON.")
        if not isinstance(req_body, dict):
            raise ValueError("Request body must be a JSON object.")

        algorithm = req_body.get("algorithm", "strassen")
        if algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {algorithm!r}; expected one of {sorted(ALGORITHMS)}.")

        matrix_a = req_body.get('matrix_a')
        matrix_b = req_body.get('matrix_b')
        n = validate_matrices(matrix_a, matrix_b, max_dim=MAX_DIM)

        result = ALGORITHMS[algorithm](Matrix.from_rows(matrix_a), Matrix.from_rows(matrix_b))

        jlog({"run_id": run_id, "algorithm": algorithm, "N": n,
              "duration_ms": (time.time() - t0) * 1000.0})
        return _json_response({"result": result.to_rows(), "algorithm": algorithm, "size": n}, 200)
    except ValueError as e:
        jlog({"run_id": run_id, "success": False, "error": str(e),
              "duration_ms": (time.time() - t0) * 1000.0})
        return _json_response({"error": str(e)}, 400)
    except Exception as e:
        _logger().exception(f"multiply failed run_id={run_id}")
        jlog({"run_id": run_id, "success": False, "error": repr(e),
              "duration_ms": (time.time() - t0) * 1000.0})
        return _json_response({"error": str(e)}, 500)
