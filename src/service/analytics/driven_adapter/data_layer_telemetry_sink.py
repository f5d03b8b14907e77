"""
Data Layer Telemetry Sink

GTM-style data layer: an append-only list of dicts that a tag manager would
consume. Commerce events are preceded by an ``{'ecommerce': None}`` entry so
one commerce block never bleeds into the next.
"""

from typing import Any

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.interface.i_telemetry_sink import ITelemetrySink


class DataLayerTelemetrySink(ITelemetrySink):
    def __init__(self) -> None:
        self.data_layer: list[dict[str, Any]] = []
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        if self._open:
            return
        self._open = True
        self.data_layer.append({'consent': 'update', 'analytics_storage': 'granted'})
        Logger.base.info('📡 [DATA_LAYER] Channel opened')

    def send(self, event: dict[str, Any]) -> None:
        if not self._open:
            raise RuntimeError(f'Telemetry channel is closed, refusing {event.get("name")}')

        if 'commerce' in event:
            self.data_layer.append({'ecommerce': None})
            self.data_layer.append(
                {'event': event['name'], 'ecommerce': event['commerce'], **event['extra']}
            )
        else:
            self.data_layer.append({'event': event['name'], **event['payload']})
        Logger.base.debug(f'📡 [DATA_LAYER] push {event["name"]}')

    def events(self) -> list[dict[str, Any]]:
        """Pushed events, without the ecommerce resets and consent updates"""
        return [entry for entry in self.data_layer if 'event' in entry]
