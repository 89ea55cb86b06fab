"""Tests for the ToolInvoker lifecycle."""

from unittest.mock import AsyncMock

import pytest

from remote_mcp.mcp.errors import InternalError, InvalidParamsError, ToolNotFoundError
from remote_mcp.mcp.invoker import ToolInvoker
from remote_mcp.mcp.registry import ToolRegistry
from remote_mcp.mcp.tool import ArgumentKind, ArgumentSpec, Tool, ToolExecutionError


class ExplodingTool(Tool):
    name = "explode"
    description = "Always fails"
    arguments = (ArgumentSpec(name="how", kind=ArgumentKind.STRING),)

    async def execute(self, arguments):
        if arguments["how"] == "tool":
            raise ToolExecutionError("boom from tool")
        if arguments["how"] == "empty":
            raise KeyError()
        raise RuntimeError("unexpected crash")


@pytest.fixture
def exploding_invoker():
    return ToolInvoker(ToolRegistry([ExplodingTool()]))


@pytest.mark.asyncio
async def test_add_result(invoker):
    result = await invoker.invoke("add", {"a": 2, "b": 3})
    assert result.model_dump() == {"content": [{"type": "text", "text": "Result: 5"}]}


@pytest.mark.asyncio
async def test_reverse_result(invoker):
    result = await invoker.invoke("reverse", {"text": "abc"})
    assert result.content[0].text == "Result: cba"


@pytest.mark.asyncio
async def test_unknown_tool(invoker):
    with pytest.raises(ToolNotFoundError, match="Unknown tool: nonexistent"):
        await invoker.invoke("nonexistent", {})


@pytest.mark.asyncio
async def test_invalid_arguments(invoker):
    with pytest.raises(InvalidParamsError, match="a must be a number"):
        await invoker.invoke("add", {"a": "x", "b": 3})


@pytest.mark.asyncio
async def test_missing_arguments_default_to_empty(invoker):
    with pytest.raises(InvalidParamsError, match="text is required"):
        await invoker.invoke("reverse", None)


@pytest.mark.asyncio
async def test_non_object_arguments(invoker):
    with pytest.raises(InvalidParamsError, match="arguments must be an object"):
        await invoker.invoke("reverse", ["abc"])


@pytest.mark.asyncio
async def test_validation_failure_skips_execution():
    tool = ExplodingTool()
    tool.execute = AsyncMock(return_value="never")
    invoker = ToolInvoker(ToolRegistry([tool]))
    with pytest.raises(InvalidParamsError):
        await invoker.invoke("explode", {"how": 1})
    tool.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_tool_execution_error_becomes_internal_error(exploding_invoker):
    with pytest.raises(InternalError) as excinfo:
        await exploding_invoker.invoke("explode", {"how": "tool"})
    assert excinfo.value.code == -32603
    assert excinfo.value.message == "boom from tool"


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_internal_error(exploding_invoker):
    with pytest.raises(InternalError, match="unexpected crash"):
        await exploding_invoker.invoke("explode", {"how": "crash"})


@pytest.mark.asyncio
async def test_exception_without_message_uses_type_name(exploding_invoker):
    with pytest.raises(InternalError, match="KeyError"):
        await exploding_invoker.invoke("explode", {"how": "empty"})


@pytest.mark.asyncio
async def test_repeated_calls_are_identical(invoker):
    first = await invoker.invoke("add", {"a": 0.1, "b": 0.2})
    second = await invoker.invoke("add", {"a": 0.1, "b": 0.2})
    assert first == second
    assert first.content[0].text == "Result: 0.30000000000000004"
