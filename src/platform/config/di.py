"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.scheduling.asyncio_expiry_scheduler import AsyncioExpiryScheduler
from src.platform.scheduling.i_expiry_scheduler import IExpiryScheduler
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter
from src.service.analytics.app.consent_manager import ConsentManager
from src.service.analytics.driven_adapter.data_layer_telemetry_sink import (
    DataLayerTelemetrySink,
)
from src.service.analytics.driven_adapter.json_file_consent_storage import (
    JsonFileConsentStorage,
)
from src.service.booking.domain.aggregate.booking_store import BookingStore
from src.service.booking.domain.catalog.flight_catalog import FLIGHTS
from src.service.booking.domain.seat_allocation_domain import SeatAllocationDomain
from src.service.booking.driving_adapter.agent_tool.booking_tools import BookingTools
from src.service.booking.driving_adapter.agent_tool.consent_tools import ConsentTools
from src.service.booking.driving_adapter.agent_tool.tool_registry import ToolRegistry
from src.service.ordering.domain.aggregate.cart_store import CartStore
from src.service.ordering.domain.catalog.menu_catalog import MENU


def create_booking_store(
    *,
    settings: Settings,
    expiry_scheduler: IExpiryScheduler,
    consent_manager: ConsentManager,
) -> BookingStore:
    store = BookingStore(
        flights=FLIGHTS,
        expiry_scheduler=expiry_scheduler,
        activity_ttl_seconds=settings.ACTIVITY_TTL_SECONDS,
        activity_limit=settings.ACTIVITY_FEED_LIMIT,
    )
    # The store mirrors the consent decision so the banner renders from one snapshot
    store.set_consent_state(consent_manager.get_state())
    consent_manager.subscribe(store.set_consent_state)
    return store


def create_tool_registry(
    *, booking_tools: BookingTools, consent_tools: ConsentTools
) -> ToolRegistry:
    return ToolRegistry(booking_tools.definitions() + consent_tools.definitions())


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Timers (activity auto-dismiss)
    expiry_scheduler = providers.Singleton(AsyncioExpiryScheduler)

    # Analytics: durable consent + outbound channel
    consent_storage = providers.Singleton(
        JsonFileConsentStorage, path=config_service.provided.CONSENT_STORE_PATH
    )
    telemetry_sink = providers.Singleton(DataLayerTelemetrySink)
    consent_manager = providers.Singleton(
        ConsentManager, storage=consent_storage, sink=telemetry_sink
    )
    analytics_emitter = providers.Singleton(
        AnalyticsEmitter, consent_manager=consent_manager, sink=telemetry_sink
    )

    # Booking session state
    booking_store = providers.Singleton(
        create_booking_store,
        settings=config_service,
        expiry_scheduler=expiry_scheduler,
        consent_manager=consent_manager,
    )
    seat_allocation = providers.Singleton(SeatAllocationDomain)

    # Agent tool protocol
    booking_tools = providers.Singleton(
        BookingTools,
        store=booking_store,
        seat_allocation=seat_allocation,
        emitter=analytics_emitter,
        currency=config_service.provided.CURRENCY,
        item_brand=config_service.provided.ITEM_BRAND,
    )
    consent_tools = providers.Singleton(
        ConsentTools,
        consent_manager=consent_manager,
        store=booking_store,
        emitter=analytics_emitter,
    )
    tool_registry = providers.Singleton(
        create_tool_registry, booking_tools=booking_tools, consent_tools=consent_tools
    )

    # Ordering (cart variant)
    cart_store = providers.Singleton(CartStore, menu=MENU)


container = Container()


def setup() -> None:
    container.config_service()
    container.consent_manager()
    container.booking_store()
    container.tool_registry()


def cleanup() -> None:
    container.expiry_scheduler().cancel_all()
    container.reset_singletons()
