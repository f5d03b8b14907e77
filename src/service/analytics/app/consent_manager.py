"""
Consent Manager

Tri-state gate in front of the telemetry sink.

    pending ──grant()──▶ granted   (buffer drained FIFO, sink opened)
       └─────deny()───▶ denied    (buffer discarded, sink stays closed)

Both decided states are terminal. The decision is read from durable storage
every time, so a decision made in an earlier session is honoured on start-up.
"""

from collections import deque
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.agent_metrics import metrics
from src.service.analytics.app.interface.i_consent_storage import (
    CONSENT_STORAGE_KEY,
    CONSENT_TIMESTAMP_KEY,
    IConsentStorage,
)
from src.service.analytics.app.interface.i_telemetry_sink import ITelemetrySink
from src.service.analytics.domain.analytics_event import BufferedEvent, to_sink_event
from src.service.shared_kernel.domain.enum.consent_state import ConsentState


ConsentListener = Callable[[ConsentState], None]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def deliver(sink: ITelemetrySink, event: BufferedEvent, metadata: dict[str, Any]) -> bool:
    """Send one event; sink failures are logged and reported as False, never raised"""
    try:
        sink.send(to_sink_event(event, metadata))
    except Exception as e:
        Logger.base.error(f'📉 [ANALYTICS] Sink rejected {event.name}: {e}')
        metrics.record_analytics_event(outcome='failed')
        return False
    metrics.record_analytics_event(outcome='sent')
    return True


class ConsentManager:
    def __init__(
        self,
        *,
        storage: IConsentStorage,
        sink: ITelemetrySink,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._storage = storage
        self._sink = sink
        self._clock = clock
        self._buffer: deque[BufferedEvent] = deque()
        self._listeners: list[ConsentListener] = []

        # A decision from an earlier session resumes tracking without asking again
        if self.get_state() is ConsentState.GRANTED:
            self._sink.open()
            Logger.base.info('🔓 [CONSENT] Previously granted, telemetry channel opened')

    def get_state(self) -> ConsentState:
        raw = self._storage.get_item(CONSENT_STORAGE_KEY)
        try:
            return ConsentState(raw)
        except ValueError:
            return ConsentState.PENDING

    def get_timestamp(self) -> Optional[str]:
        return self._storage.get_item(CONSENT_TIMESTAMP_KEY)

    def consent_metadata(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {'consent_status': self.get_state().value}
        timestamp = self.get_timestamp()
        if timestamp:
            metadata['consent_timestamp'] = timestamp
        return metadata

    @property
    def pending_count(self) -> int:
        return len(self._buffer)

    @Logger.io
    def grant(self) -> bool:
        """Returns False without side effects if consent was already decided"""
        if self.get_state().is_decided:
            return False

        self._persist(ConsentState.GRANTED)
        self._sink.open()

        # Metadata is read now, after persisting, so replayed events carry the grant
        metadata = self.consent_metadata()
        drained = 0
        while self._buffer:
            deliver(self._sink, self._buffer.popleft(), metadata)
            drained += 1
        metrics.set_buffer_size(0)
        Logger.base.info(f'✅ [CONSENT] Granted, replayed {drained} buffered events')

        self._notify(ConsentState.GRANTED)
        return True

    @Logger.io
    def deny(self) -> bool:
        if self.get_state().is_decided:
            return False

        self._persist(ConsentState.DENIED)
        discarded = len(self._buffer)
        self._buffer.clear()
        metrics.set_buffer_size(0)
        Logger.base.info(f'🚫 [CONSENT] Denied, discarded {discarded} buffered events')

        self._notify(ConsentState.DENIED)
        return True

    def buffer_or_drop(self, event: BufferedEvent) -> bool:
        """
        Route an event through the gate.

        Returns:
            True when the event was buffered (pending) or dropped (denied);
            the caller must not send it. False when granted; the caller
            sends it right away.
        """
        state = self.get_state()
        if state is ConsentState.GRANTED:
            return False
        if state is ConsentState.PENDING:
            self._buffer.append(event)
            metrics.record_analytics_event(outcome='buffered')
            metrics.set_buffer_size(len(self._buffer))
        else:
            metrics.record_analytics_event(outcome='dropped')
        return True

    def subscribe(self, listener: ConsentListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _persist(self, state: ConsentState) -> None:
        self._storage.set_item(CONSENT_STORAGE_KEY, state.value)
        self._storage.set_item(CONSENT_TIMESTAMP_KEY, self._clock())
        metrics.record_consent_decision(decision=state.value)

    def _notify(self, state: ConsentState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                Logger.base.exception(f'🔔 [CONSENT] Listener failed: {e}')
