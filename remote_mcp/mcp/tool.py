"""
MCP Tool - Abstract base class for all tools.

A tool declares its arguments as ``ArgumentSpec`` entries. The JSON Schema
advertised by tools/list is generated from those specs, and the same schema
drives argument validation, so the two cannot drift apart.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Tuple

import jsonschema
from pydantic import BaseModel, Field

from .errors import InvalidParamsError
from .protocol import ToolDescriptor


class ToolExecutionError(RuntimeError):
    """Raised when the tool fails to produce a result."""


class ArgumentKind(str, Enum):
    """Primitive JSON types a tool argument may declare."""
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"

    @property
    def phrase(self) -> str:
        article = "an" if self.value[0] in "aeiou" else "a"
        return f"{article} {self.value}"


class ArgumentSpec(BaseModel):
    """One declared tool argument."""
    name: str = Field(..., min_length=1)
    kind: ArgumentKind
    required: bool = True
    description: str = ""


class Tool(ABC):
    """
    Abstract base class for all MCP tools.

    Subclasses set ``name``, ``description`` and ``arguments`` and implement
    ``execute``.
    """

    name: str
    description: str = ""
    arguments: Tuple[ArgumentSpec, ...] = ()

    def input_schema(self) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}
        for spec in self.arguments:
            prop: Dict[str, Any] = {"type": spec.kind.value}
            if spec.description:
                prop["description"] = spec.description
            properties[spec.name] = prop
        return {
            "type": "object",
            "properties": properties,
            "required": [spec.name for spec in self.arguments if spec.required],
        }

    def descriptor(self) -> ToolDescriptor:
        """Return ToolDescriptor for discovery."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema(),
        )

    def validate_arguments(self, arguments: Dict[str, Any]) -> None:
        """
        Validate arguments against the generated input schema.

        Raises:
            InvalidParamsError: naming the first violated constraint
        """
        validator = jsonschema.Draft7Validator(self.input_schema())
        errors = sorted(validator.iter_errors(arguments), key=lambda e: list(e.path))
        if errors:
            raise InvalidParamsError(self._describe(errors[0]))

    def _describe(self, error: jsonschema.ValidationError) -> str:
        if error.validator == "required":
            missing = [name for name in error.validator_value if name not in error.instance]
            verb = "is" if len(missing) == 1 else "are"
            return f"{', '.join(missing)} {verb} required"
        if error.validator == "type" and error.path:
            field = error.path[-1]
            return f"{field} must be {ArgumentKind(error.validator_value).phrase}"
        return error.message

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> str:
        """
        Execute tool logic on pre-validated arguments.

        Returns:
            Text placed in the result content

        Raises:
            ToolExecutionError: If the tool cannot produce a result
        """
