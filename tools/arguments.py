# =============================================================================
# tools/arguments.py  -  Typed tool-call arguments
# =============================================================================
#
# Tool-call arguments arrive as an untyped JSON object.  Each tool decodes
# them into one of the strict pydantic models below; a decode failure is
# the InvalidParams signal.  Strict mode means {"dependency": 42} is
# rejected instead of coerced to "42".  Extra keys are ignored.
# =============================================================================

from typing import Any, ClassVar, TypeVar

from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.models import DependencyRef

_DEPENDENCY_SHAPE = '"group/artifact" (e.g. "metosin/reitit")'


class DependencyArgs(BaseModel):
    """Arguments naming a single dependency."""

    model_config = ConfigDict(strict=True)

    expected_shape: ClassVar[str] = f"Invalid dependency format. Expected {_DEPENDENCY_SHAPE}"

    dependency: str

    @field_validator("dependency")
    @classmethod
    def dependency_has_group_separator(cls, value: str) -> str:
        if "/" not in value:
            raise ValueError("dependency must contain '/'")
        return value

    @property
    def ref(self) -> DependencyRef:
        return DependencyRef.parse(self.dependency)


class VersionCheckArgs(DependencyArgs):
    expected_shape: ClassVar[str] = (
        f"Invalid arguments. Expected dependency as {_DEPENDENCY_SHAPE} "
        'and version as a string (e.g. "0.7.2")'
    )

    version: str


class VersionHistoryArgs(DependencyArgs):
    expected_shape: ClassVar[str] = (
        f"Invalid arguments. Expected dependency as {_DEPENDENCY_SHAPE} "
        "and an optional positive integer limit"
    )

    limit: int | None = Field(default=None, ge=1)


ArgsT = TypeVar("ArgsT", bound=DependencyArgs)


def parse_arguments(model: type[ArgsT], arguments: Any) -> ArgsT:
    """Decode raw tool arguments or reject them.

    Raises:
        McpError: INVALID_PARAMS, with the model's expected-shape message.
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise McpError(
            types.ErrorData(code=types.INVALID_PARAMS, message=model.expected_shape)
        ) from e
