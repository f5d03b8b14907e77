"""
Analytics Events

Two event shapes leave the core: a standard named event with a flat
payload, and a GA4-style commerce event whose commerce block must be sent
on its own. Both remember the interaction source they were emitted with so
that replay after a consent grant tags them correctly.
"""

from typing import Any, Union

import attrs

from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


PII_KEYS: frozenset[str] = frozenset(
    {'name', 'passenger_name', 'email', 'card', 'card_number', 'expiry', 'cvv'}
)


@attrs.frozen
class StandardEvent:
    name: str
    payload: dict[str, Any] = attrs.field(factory=dict)
    source: InteractionSource = InteractionSource.HUMAN


@attrs.frozen
class CommerceEvent:
    name: str
    commerce: dict[str, Any] = attrs.field(factory=dict)
    extra: dict[str, Any] = attrs.field(factory=dict)
    source: InteractionSource = InteractionSource.HUMAN


BufferedEvent = Union[StandardEvent, CommerceEvent]


def strip_pii(fields: dict[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Return a copy without PII keys plus the keys that were removed"""
    removed = [key for key in fields if key in PII_KEYS]
    return {k: v for k, v in fields.items() if k not in PII_KEYS}, removed


def to_sink_event(event: BufferedEvent, metadata: dict[str, Any]) -> dict[str, Any]:
    """
    Serialize an event for the telemetry sink.

    ``metadata`` (consent status/timestamp) is computed by the caller at the
    moment of sending and merged together with the interaction source.
    """
    stamp = {**metadata, 'interaction_source': event.source.value}
    if isinstance(event, CommerceEvent):
        return {
            'name': event.name,
            'commerce': dict(event.commerce),
            'extra': {**event.extra, **stamp},
        }
    return {'name': event.name, 'payload': {**event.payload, **stamp}}
