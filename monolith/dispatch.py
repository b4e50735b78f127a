"""Dispatch router mapping operation names to validated invocations.

The router owns one lookup table holding the discovery tools and the
functional utilities side by side. Each :class:`Operation` carries the
argument schema used for validation and the handler to call, so the table
serves both request dispatch and the capability listing published to
clients; the two views cannot drift apart.

Pipeline for every request (:meth:`Dispatcher.dispatch`):

1. look up the operation name (unknown -> ``Unknown tool: <name>``);
2. validate the raw argument bag with the generic validator;
3. call the handler with the validated keyword arguments;
4. discovery payloads are returned as-is, functional envelopes serialised.

Any failure in steps 1-4 is caught here and folded into the uniform payload
``{success: false, error, errorCode: "TOOL_EXECUTION_ERROR"}`` with
``is_error`` set. Nothing propagates to the transport.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .catalog import FunctionCatalog
from .exceptions import MonolithError, RegistryMismatchError, UnknownToolError
from .functions import FUNCTION_BINDINGS, FunctionBinding
from .responses import ErrorResponse, SuccessResponse
from .schemas import ArgumentSchema, validate_arguments

logger = logging.getLogger(__name__)

TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"

OperationKind = Literal["discovery", "function"]


@dataclass(frozen=True)
class Operation:
    """One dispatchable operation."""

    name: str
    description: str
    schema: ArgumentSchema
    handler: Callable[..., Any]
    kind: OperationKind

    def capability(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.schema.json_schema(),
        }


@dataclass(frozen=True)
class ToolOutcome:
    """Transport-level result: a JSON-ready payload and the error flag."""

    payload: Any
    is_error: bool = False

    def to_text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False)


def discovery_operations(tools: Iterable[object]) -> list[Operation]:
    """Collect methods marked with ``mcp_tool`` on the given tool instances."""
    operations = []
    for tool in tools:
        for attr_name in dir(tool):  # introspect public methods
            if attr_name.startswith("_"):
                continue
            attr = getattr(tool, attr_name)
            if callable(attr) and getattr(attr, "_mcp_tool", False):
                operations.append(
                    Operation(
                        name=attr._mcp_name,
                        description=attr._mcp_description,
                        schema=attr._mcp_schema,
                        handler=attr,
                        kind="discovery",
                    )
                )
    return operations


def check_bindings(
    catalog: FunctionCatalog, bindings: Iterable[FunctionBinding]
) -> None:
    """Ensure catalog entries and functional bindings match one to one.

    Raises:
        RegistryMismatchError: On missing, extra or repeated bindings.
    """
    bound = [b.name for b in bindings]
    problems = []
    repeated = sorted({n for n in bound if bound.count(n) > 1})
    if repeated:
        problems.append(f"bound more than once: {', '.join(repeated)}")
    unbound = [n for n in catalog.names() if n not in bound]
    if unbound:
        problems.append(f"catalog entries without binding: {', '.join(unbound)}")
    undocumented = [n for n in bound if not catalog.exists(n)]
    if undocumented:
        problems.append(f"bindings without catalog entry: {', '.join(undocumented)}")
    if problems:
        raise RegistryMismatchError("; ".join(problems))


def function_operations(
    catalog: FunctionCatalog, bindings: Iterable[FunctionBinding]
) -> list[Operation]:
    """Build functional operations in catalog order, described by the catalog."""
    by_name = {b.name: b for b in bindings}
    operations = []
    for entry in catalog.all():
        binding = by_name[entry.name]
        operations.append(
            Operation(
                name=entry.name,
                description=entry.description,
                schema=binding.schema,
                handler=binding.implementation,
                kind="function",
            )
        )
    return operations


def _envelope_payload(result: Any) -> dict[str, Any]:
    if not isinstance(result, SuccessResponse | ErrorResponse):
        raise TypeError(
            f"Implementation returned {type(result).__name__}, expected a response envelope"
        )
    return result.to_payload()


def failure(message: str) -> ToolOutcome:
    """Uniform transport-level failure."""
    return ToolOutcome(
        payload={
            "success": False,
            "error": message,
            "errorCode": TOOL_EXECUTION_ERROR,
        },
        is_error=True,
    )


class Dispatcher:
    """Name -> operation lookup plus the validate/execute/wrap pipeline."""

    def __init__(self, operations: Iterable[Operation]):
        self._operations: dict[str, Operation] = {}
        for operation in operations:
            if operation.name in self._operations:
                raise RegistryMismatchError(
                    f"Operation '{operation.name}' is registered twice"
                )
            self._operations[operation.name] = operation
        logger.debug(f"Dispatcher ready with {len(self._operations)} operations")

    @classmethod
    def build(
        cls,
        catalog: FunctionCatalog,
        tools: Iterable[object],
        bindings: Iterable[FunctionBinding] = FUNCTION_BINDINGS,
    ) -> Dispatcher:
        """Assemble the table from discovery tools and functional bindings."""
        bindings = tuple(bindings)
        check_bindings(catalog, bindings)
        return cls(
            [*discovery_operations(tools), *function_operations(catalog, bindings)]
        )

    # Table views -------------------------------------------------------------
    def operation(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._operations)

    def operations(self) -> list[Operation]:
        return list(self._operations.values())

    def capabilities(self) -> list[dict[str, Any]]:
        """Machine-readable descriptor of every dispatchable operation."""
        return [op.capability() for op in self._operations.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    # Pipeline ----------------------------------------------------------------
    def dispatch(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> ToolOutcome:
        """Run one request through lookup, validation, execution and wrapping."""
        logger.debug(f"Dispatching '{name}'")
        try:
            operation = self.operation(name)
            values = validate_arguments(operation.schema, arguments, name).unwrap()
            result = operation.handler(**values)
            if operation.kind == "function":
                result = _envelope_payload(result)
        except MonolithError as e:
            logger.warning(f"Tool '{name}' failed: {e}")
            return failure(str(e))
        except Exception as e:
            logger.exception(f"Unexpected error while running tool '{name}'")
            return failure(str(e) or type(e).__name__)
        return ToolOutcome(payload=result)


__all__ = [
    "Dispatcher",
    "Operation",
    "TOOL_EXECUTION_ERROR",
    "ToolOutcome",
    "check_bindings",
    "discovery_operations",
    "failure",
    "function_operations",
]
