"""
Test Configuration and Fixtures

This module provides:
- Environment setup (log directory, throwaway consent file) before app imports
- Wired-up domain objects (store, consent manager, emitter, tool registry)
- An HTTP client running the real app with session-only consent storage

Architecture:
- Unit tests (marked ``unit``) build their objects from these fixtures
- HTTP tests go through ``client`` and the real DI container
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault(
        'CONSENT_STORE_PATH', str(Path(__file__).parent / 'test_state' / 'consent.json')
    )


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container, create_tool_registry  # noqa: E402
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter  # noqa: E402
from src.service.analytics.app.consent_manager import ConsentManager  # noqa: E402
from src.service.analytics.driven_adapter.data_layer_telemetry_sink import (  # noqa: E402
    DataLayerTelemetrySink,
)
from src.service.analytics.driven_adapter.in_memory_consent_storage import (  # noqa: E402
    InMemoryConsentStorage,
)
from src.service.booking.domain.aggregate.booking_store import BookingStore  # noqa: E402
from src.service.booking.domain.catalog.flight_catalog import FLIGHTS  # noqa: E402
from src.service.booking.domain.seat_allocation_domain import SeatAllocationDomain  # noqa: E402
from src.service.booking.driving_adapter.agent_tool.booking_tools import BookingTools  # noqa: E402
from src.service.booking.driving_adapter.agent_tool.consent_tools import ConsentTools  # noqa: E402
from src.service.booking.driving_adapter.agent_tool.tool_registry import ToolRegistry  # noqa: E402
from test.shared.fakes import FIXED_TIMESTAMP, FakeExpiryScheduler  # noqa: E402


# =============================================================================
# Domain fixtures
# =============================================================================
@pytest.fixture
def expiry_scheduler() -> FakeExpiryScheduler:
    return FakeExpiryScheduler()


@pytest.fixture
def consent_storage() -> InMemoryConsentStorage:
    return InMemoryConsentStorage()


@pytest.fixture
def sink() -> DataLayerTelemetrySink:
    return DataLayerTelemetrySink()


@pytest.fixture
def consent_manager(
    consent_storage: InMemoryConsentStorage, sink: DataLayerTelemetrySink
) -> ConsentManager:
    return ConsentManager(storage=consent_storage, sink=sink, clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def emitter(consent_manager: ConsentManager, sink: DataLayerTelemetrySink) -> AnalyticsEmitter:
    return AnalyticsEmitter(consent_manager=consent_manager, sink=sink)


@pytest.fixture
def booking_store(expiry_scheduler: FakeExpiryScheduler) -> BookingStore:
    return BookingStore(
        flights=FLIGHTS,
        expiry_scheduler=expiry_scheduler,
        activity_ttl_seconds=6.0,
        activity_limit=10,
    )


@pytest.fixture
def tool_registry(
    booking_store: BookingStore,
    consent_manager: ConsentManager,
    emitter: AnalyticsEmitter,
) -> ToolRegistry:
    consent_manager.subscribe(booking_store.set_consent_state)
    booking_tools = BookingTools(
        store=booking_store, seat_allocation=SeatAllocationDomain(), emitter=emitter
    )
    consent_tools = ConsentTools(
        consent_manager=consent_manager, store=booking_store, emitter=emitter
    )
    return create_tool_registry(booking_tools=booking_tools, consent_tools=consent_tools)


# =============================================================================
# HTTP fixtures
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from src.main import app

    container.consent_storage.override(providers.Singleton(InMemoryConsentStorage))
    container.reset_singletons()
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.consent_storage.reset_override()
        container.reset_singletons()
