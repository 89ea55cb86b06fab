"""Text reversal tool."""

from __future__ import annotations

from typing import Any, Dict

from remote_mcp.mcp.tool import ArgumentKind, ArgumentSpec, Tool


def reverse_code_units(text: str) -> str:
    """Reverse ``text`` by UTF-16 code unit.

    Characters outside the BMP are split into their surrogate halves and the
    halves end up swapped. The result may hold lone surrogates.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    units = [data[i:i + 2] for i in range(0, len(data), 2)]
    return b"".join(reversed(units)).decode("utf-16-le", "surrogatepass")


class ReverseTool(Tool):
    name = "reverse"
    description = "Return the input text reversed"
    arguments = (
        ArgumentSpec(name="text", kind=ArgumentKind.STRING),
    )

    async def execute(self, arguments: Dict[str, Any]) -> str:
        return f"Result: {reverse_code_units(arguments['text'])}"
