"""
main.py — Algorithm Animation Flask API
=========================================
JSON front for the engine.  Rendering lives in the browser; this
server only produces inputs, frames and step logs.

Routes:
  GET  /api/algorithms               – registry listing (optional ?tag=)
  GET  /api/algorithms/<key>         – one registry entry
  POST /api/input/generate           – random array / graph / linked list
  POST /api/live/<key>/frames        – every frame of a live run, unpaced
  POST /api/log/<key>                – the full step log of a step-log run

Request bodies for the run routes:
  {"input": <payload>, "params": {...}}

Errors:
  400 {"error": ...}                           malformed input / params, input over its size cap
  404 {"state": "unavailable", "error": ...}   unknown or unimplemented algorithm
"""

import logging

from flask import Flask, request, jsonify

from algorithms import LIVE, LOG, list_algorithms, algorithms_by_tag
from algorithms.step import json_safe
from engine import (
    EngineConfig, Recorder, RunState, UnavailableAlgorithm,
    check_input_size, generate_input, generate_log, input_size, prepare_input, resolve,
)


config = EngineConfig.from_env()
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(UnavailableAlgorithm)
def handle_unavailable(e: UnavailableAlgorithm):
    return jsonify({"state": RunState.UNAVAILABLE.value, "error": str(e)}), 404


@app.errorhandler(ValueError)
def handle_bad_input(e: ValueError):
    logger.info("rejected request to %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 400


def _body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def _run_args(data: dict):
    if "input" not in data:
        raise ValueError("missing 'input'")
    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError("'params' must be an object")
    return data["input"], params


def _prepared(key: str, mode: str, payload):
    """Resolve the algorithm, build its input and hold it to the configured size cap."""
    info = resolve(key, mode)
    data = prepare_input(info, payload)
    check_input_size(info.input_kind, input_size(data), config.size_limit(info.input_kind))
    return info, data


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    tag = request.args.get("tag")
    infos = algorithms_by_tag(tag) if tag else list_algorithms()
    return jsonify({"algorithms": [info.to_dict() for info in infos]})


@app.route("/api/algorithms/<key>", methods=["GET"])
def api_algorithm(key):
    # declared-only entries are still listed, so look up without resolving
    for info in list_algorithms():
        if info.key == key:
            return jsonify(info.to_dict())
    raise UnavailableAlgorithm(key, "unknown algorithm")


# ---------------------------------------------------------------------------
# API: Input Generation
# ---------------------------------------------------------------------------
@app.route("/api/input/generate", methods=["POST"])
def api_input_generate():
    data = _body()
    kind = data.get("kind", "array")
    size = data.get("size")
    if size is not None and (not isinstance(size, int) or isinstance(size, bool) or size < 0):
        raise ValueError("'size' must be a non-negative integer")
    if size is not None:
        check_input_size(kind, size, config.size_limit(kind))

    options = {k: v for k, v in data.items() if k in ("low", "high", "extra_edge_ratio", "weighted")}
    generated = generate_input(kind, size=size, seed=data.get("seed"), **options)

    if kind == "array":
        payload = [item.to_dict() for item in generated]
    else:
        payload = generated.to_dict()
    return jsonify({"kind": kind, "input": payload})


# ---------------------------------------------------------------------------
# API: Runs
# ---------------------------------------------------------------------------
@app.route("/api/live/<key>/frames", methods=["POST"])
def api_live_frames(key):
    payload, params = _run_args(_body())
    _, data = _prepared(key, LIVE, payload)
    rec = Recorder()
    frames = rec.record_live(key, data, **params)
    metrics = rec.get_metrics()
    state = RunState.COMPLETED if metrics.completed else RunState.IDLE
    return jsonify({
        "state":   state.value,
        "frames":  [f.to_dict() for f in frames],
        "metrics": metrics.__dict__,
    })


@app.route("/api/log/<key>", methods=["POST"])
def api_log(key):
    payload, params = _run_args(_body())
    info, data = _prepared(key, LOG, payload)
    log = generate_log(key, data, **params)
    return jsonify({
        "algo_key":    info.key,
        "pseudocode":  list(info.pseudocode),
        "total_steps": len(log),
        "steps":       [s.to_dict() for s in log.steps],
        "aux":         json_safe(log.aux),
    })


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Algorithm animation API on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
