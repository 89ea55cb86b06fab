"""Envelope validation and response envelope construction."""

from __future__ import annotations

from typing import Any, Dict

from .errors import MCPError
from .protocol import (
    JSONRPC_VERSION,
    ClassifiedRequest,
    JsonRpcErrorEnvelope,
    JsonRpcErrorObject,
    JsonRpcId,
    RequestKind,
)


def _is_valid_id(value: Any) -> bool:
    # bool is an int subclass but never a valid JSON-RPC id
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (str, int, float))


def _echo_id(payload: Dict[str, Any]) -> JsonRpcId:
    value = payload.get("id")
    if value is None or not _is_valid_id(value):
        return None
    return value


def classify_request(payload: Any) -> ClassifiedRequest:
    """Classify a decoded request as notification, call or malformed.

    A notification has a method and no ``id`` key at all; ``"id": null`` is a
    call. Calls additionally need ``jsonrpc == "2.0"``, a string or number id
    and, when present, an object ``params``.
    """
    if not isinstance(payload, dict):
        return ClassifiedRequest(kind=RequestKind.MALFORMED)

    method = payload.get("method")
    has_method = isinstance(method, str) and bool(method)

    if "id" not in payload and has_method:
        params = payload.get("params")
        return ClassifiedRequest(
            kind=RequestKind.NOTIFICATION,
            method=method,
            params=params if isinstance(params, dict) else {},
        )

    params = payload.get("params")
    if params is None:
        params = {}
    if (
        payload.get("jsonrpc") != JSONRPC_VERSION
        or not has_method
        or "id" not in payload
        or not _is_valid_id(payload["id"])
        or not isinstance(params, dict)
    ):
        return ClassifiedRequest(kind=RequestKind.MALFORMED, id=_echo_id(payload))

    return ClassifiedRequest(
        kind=RequestKind.CALL,
        method=method,
        id=payload["id"],
        params=params,
    )


def result_envelope(request_id: JsonRpcId, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_envelope(request_id: JsonRpcId, error: MCPError) -> Dict[str, Any]:
    return JsonRpcErrorEnvelope(
        id=request_id,
        error=JsonRpcErrorObject(code=int(error.code), message=error.message),
    ).model_dump()
