from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .responses import ToolResult, error_response

JsonSchema = Dict[str, Any]
ToolHandler = Callable[[Mapping[str, Any]], ToolResult]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    handler: ToolHandler
    description: str
    category: str
    tags: tuple[str, ...]
    parameters: Mapping[str, JsonSchema]
    required: tuple[str, ...]

    @property
    def input_schema(self) -> JsonSchema:
        schema: JsonSchema = {
            "type": "object",
            "properties": {name: dict(definition) for name, definition in self.parameters.items()},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def as_tool(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


REGISTRY: Dict[str, ToolSpec] = {}


def _guard(handler: ToolHandler, failure: str) -> ToolHandler:
    @functools.wraps(handler)
    def wrapper(params: Mapping[str, Any]) -> ToolResult:
        try:
            return handler(params)
        except Exception as exc:  # noqa: BLE001
            logger.exception("%s", failure)
            return error_response(f"{failure}: {exc}")

    return wrapper


def register_tool(
    name: str,
    *,
    description: str,
    category: str,
    failure: str,
    parameters: Optional[Mapping[str, JsonSchema]] = None,
    required: Iterable[str] = (),
    tags: Optional[Iterable[str]] = None,
) -> Callable[[ToolHandler], ToolHandler]:
    """Register ``handler`` as a tool.

    The stored handler never raises: exceptions become error results whose
    message starts with ``failure``.
    """

    def decorator(handler: ToolHandler) -> ToolHandler:
        if name in REGISTRY:
            raise ValueError(f"Tool '{name}' is already registered.")
        properties = dict(parameters or {})
        missing = [field for field in required if field not in properties]
        if missing:
            raise ValueError(f"Tool '{name}' requires undeclared parameters: {', '.join(missing)}")
        guarded = _guard(handler, failure)
        REGISTRY[name] = ToolSpec(
            name=name,
            handler=guarded,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            parameters=properties,
            required=tuple(required),
        )
        return guarded

    return decorator


def get_tools() -> List[ToolSpec]:
    return list(REGISTRY.values())


def tool_schemas() -> Dict[str, Dict[str, Any]]:
    return {name: spec.as_tool() for name, spec in REGISTRY.items()}


def tool_handlers() -> Dict[str, ToolHandler]:
    return {name: spec.handler for name, spec in REGISTRY.items()}


def get_handler(name: str) -> Optional[ToolHandler]:
    spec = REGISTRY.get(name)
    return spec.handler if spec else None
