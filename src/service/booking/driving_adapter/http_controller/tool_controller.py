"""
Agent Tool HTTP Controller

Discovery and dispatch over HTTP. Agents call tools as they are; the
presentation layer sends ``X-Interaction-Source: human`` so its calls are
attributed to the user and leave no trace in the agent activity feed.
"""

from typing import Any, List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, Header

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.driving_adapter.agent_tool.tool_registry import ToolRegistry
from src.service.booking.driving_adapter.schema.tool_schema import (
    ToolCallResponse,
    ToolDescriptionResponse,
)
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


router = APIRouter()


@router.get('', response_model=List[ToolDescriptionResponse], response_model_by_alias=True)
@inject
async def list_tools(
    tool_registry: ToolRegistry = Depends(Provide[Container.tool_registry]),
) -> list[dict[str, Any]]:
    return tool_registry.list_tools()


@router.post(
    '/{tool_name}',
    response_model=ToolCallResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
@Logger.io
@inject
async def call_tool(
    tool_name: str,
    params: Any = Body(default=None),
    interaction_source: InteractionSource = Header(
        default=InteractionSource.AGENT, alias='X-Interaction-Source'
    ),
    tool_registry: ToolRegistry = Depends(Provide[Container.tool_registry]),
) -> dict[str, Any]:
    # Always 200: tool failures are part of the protocol, not HTTP errors
    return tool_registry.dispatch(tool_name, params, source=interaction_source).to_dict()
