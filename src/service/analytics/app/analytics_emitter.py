"""
Analytics Emitter

Normalizes outbound events and hands them to the consent gate. Events the
gate does not hold are sent immediately, stamped with the consent metadata
of the moment they are sent.
"""

from typing import Any, Optional

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.consent_manager import ConsentManager, deliver
from src.service.analytics.app.interface.i_telemetry_sink import ITelemetrySink
from src.service.analytics.domain.analytics_event import (
    BufferedEvent,
    CommerceEvent,
    StandardEvent,
    strip_pii,
)
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


class AnalyticsEmitter:
    def __init__(self, *, consent_manager: ConsentManager, sink: ITelemetrySink) -> None:
        self.consent_manager = consent_manager
        self.sink = sink

    def emit(
        self,
        name: str,
        payload: Optional[dict[str, Any]] = None,
        *,
        source: InteractionSource = InteractionSource.HUMAN,
    ) -> None:
        clean = self._scrub(name, payload or {})
        self._dispatch(StandardEvent(name=name, payload=clean, source=source))

    def emit_commerce(
        self,
        name: str,
        commerce: dict[str, Any],
        extra: Optional[dict[str, Any]] = None,
        *,
        source: InteractionSource = InteractionSource.HUMAN,
    ) -> None:
        event = CommerceEvent(
            name=name,
            commerce=self._scrub(name, commerce),
            extra=self._scrub(name, extra or {}),
            source=source,
        )
        self._dispatch(event)

    def _dispatch(self, event: BufferedEvent) -> None:
        if self.consent_manager.buffer_or_drop(event):
            return
        deliver(self.sink, event, self.consent_manager.consent_metadata())

    @staticmethod
    def _scrub(name: str, fields: dict[str, Any]) -> dict[str, Any]:
        clean, removed = strip_pii(fields)
        if removed:
            Logger.base.warning(f'🙈 [ANALYTICS] Stripped PII keys {removed} from {name}')
        return clean
