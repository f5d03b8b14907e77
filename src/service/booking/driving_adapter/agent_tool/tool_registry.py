"""
Agent Tool Registry

Static name -> (description, params model, handler) table built once at
start-up. ``dispatch`` is the single entry point for agents and UI alike
and never raises: every failure becomes an ``isError`` response.
"""

from typing import Any, Callable, Optional

import attrs
from opentelemetry import trace
from pydantic import BaseModel, ValidationError

from src.platform.exception.exceptions import CustomBaseError, DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.agent_metrics import metrics
from src.service.booking.domain.enum.tool_name import ToolName
from src.service.booking.driving_adapter.agent_tool.tool_response import ToolResponse
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


ToolHandler = Callable[..., dict[str, Any]]

tracer = trace.get_tracer(__name__)


@attrs.frozen
class ToolDefinition:
    name: ToolName
    description: str
    params_model: type[BaseModel]
    handler: ToolHandler

    def describe(self) -> dict[str, Any]:
        return {
            'name': self.name.value,
            'description': self.description,
            'inputSchema': self.params_model.model_json_schema(),
        }


class ToolRegistry:
    def __init__(self, definitions: Optional[list[ToolDefinition]] = None) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: ToolDefinition) -> None:
        if definition.name.value in self._tools:
            raise DomainError(f'Tool "{definition.name}" is already registered')
        self._tools[definition.name.value] = definition

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        return [definition.describe() for definition in self._tools.values()]

    def dispatch(
        self,
        name: str,
        raw_params: Any = None,
        *,
        source: InteractionSource = InteractionSource.AGENT,
    ) -> ToolResponse:
        with tracer.start_as_current_span(f'tool.{name}') as span:
            span.set_attribute('tool.source', source.value)
            response = self._dispatch(name, raw_params, source=source)
            span.set_attribute('tool.is_error', response.is_error)

        metrics.record_tool_invocation(
            tool=name if name in self._tools else 'unknown',
            source=source.value,
            success=not response.is_error,
        )
        return response

    def _dispatch(
        self, name: str, raw_params: Any, *, source: InteractionSource
    ) -> ToolResponse:
        definition = self._tools.get(name)
        if definition is None:
            return ToolResponse.error(f'Unknown tool "{name}"', available_tools=self.names)

        try:
            # Anything but an object (or nothing) fails model validation
            params = definition.params_model.model_validate(
                {} if raw_params is None else raw_params
            )
        except ValidationError as e:
            Logger.base.info(f'🧰 [TOOL] {name} rejected invalid params: {e.error_count()} errors')
            return ToolResponse.error(
                'Invalid parameters',
                errors=e.errors(include_url=False, include_context=False, include_input=False),
            )

        try:
            result = definition.handler(params, source=source)
        except CustomBaseError as e:
            detail = getattr(e, 'detail', None) or {}
            return ToolResponse.error(e.message, **detail)
        except Exception as e:
            Logger.base.exception(f'🧰 [TOOL] {name} failed unexpectedly: {e}')
            return ToolResponse.error(f'Tool "{name}" failed unexpectedly')

        return ToolResponse.ok(result)
