"""
FastAPI app assembly: middleware, error mapping, the four context routers
and the operational endpoints. ``src.main`` supplies the lifespan.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.analytics.driving_adapter.http_controller.consent_controller import (
    router as consent_router,
)
from src.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.booking.driving_adapter.http_controller.tool_controller import (
    router as tool_router,
)
from src.service.ordering.driving_adapter.http_controller.cart_controller import (
    router as cart_router,
)


ROUTERS: list[tuple[APIRouter, str, str]] = [
    (tool_router, '/api/tools', 'tools'),
    (booking_router, '/api/booking', 'booking'),
    (consent_router, '/api/consent', 'consent'),
    (cart_router, '/api/cart', 'cart'),
]


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Agent-ready flight booking core',
) -> FastAPI:
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    for router, prefix, tag in ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])
    app.include_router(_operational_router())

    return app


def _operational_router() -> APIRouter:
    router = APIRouter(tags=['ops'])

    @router.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @router.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus exposition of the tool and consent counters"""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return router
