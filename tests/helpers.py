"""Shared builders for MCP test payloads."""

from typing import Callable, List

import httpx

ARCHIVE_URL = "http://archive.test/api/conversation"


class ArchiveStub:
    """Records archive requests and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = self.ok

    @staticmethod
    def ok(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"url": "https://aiarchives.test/c/abc123"})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


def call(method, params=None, request_id=1):
    """Build a JSON-RPC call envelope."""
    payload = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        payload["params"] = params
    return payload


def tool_call(name, arguments=None, request_id=1):
    params = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return call("tools/call", params, request_id)


def text_of(envelope):
    return envelope["result"]["content"][0]["text"]
