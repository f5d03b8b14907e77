"""
AgentAir booking API

Run with ``uvicorn src.main:app``. One process holds one booking session:
agent tools, booking snapshots, analytics consent and the cheesesteak cart.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [AgentAir] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [AgentAir] Dependency injection wired')

    # Build the session singletons (reads the stored consent decision)
    setup()
    consent_state = container.consent_manager().get_state()
    tool_count = len(container.tool_registry().names)
    Logger.base.info(f'🧰 [AgentAir] {tool_count} tools registered, consent is {consent_state}')

    yield

    Logger.base.info('🛑 [AgentAir] Shutting down...')
    cleanup()
    container.unwire()
    Logger.base.info('👋 [AgentAir] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    return RedirectResponse(url='/docs')
