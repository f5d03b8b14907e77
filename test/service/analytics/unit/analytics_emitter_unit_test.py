import pytest

from src.service.analytics.domain.analytics_event import (
    CommerceEvent,
    StandardEvent,
    strip_pii,
    to_sink_event,
)
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


pytestmark = pytest.mark.unit


class TestStripPii:
    def test_removes_only_pii_keys(self):
        clean, removed = strip_pii(
            {'email': 'a@b.c', 'card_number': '4111', 'booking_value': 299}
        )

        assert clean == {'booking_value': 299}
        assert sorted(removed) == ['card_number', 'email']

    def test_leaves_input_untouched(self):
        fields = {'cvv': '123'}

        strip_pii(fields)

        assert fields == {'cvv': '123'}


class TestToSinkEvent:
    def test_standard_event_merges_metadata_into_payload(self):
        event = StandardEvent(name='search', payload={'results_count': 2})

        wire = to_sink_event(event, {'consent_status': 'granted'})

        assert wire == {
            'name': 'search',
            'payload': {
                'results_count': 2,
                'consent_status': 'granted',
                'interaction_source': 'human',
            },
        }

    def test_commerce_event_keeps_commerce_block_separate(self):
        event = CommerceEvent(
            name='add_to_cart',
            commerce={'currency': 'USD', 'value': 299},
            source=InteractionSource.AGENT,
        )

        wire = to_sink_event(event, {'consent_status': 'granted'})

        assert wire['commerce'] == {'currency': 'USD', 'value': 299}
        assert wire['extra'] == {'consent_status': 'granted', 'interaction_source': 'agent'}


class TestAnalyticsEmitter:
    def test_pii_never_reaches_the_buffer(self, emitter, consent_manager, sink):
        # Given
        emitter.emit('checkout', {'email': 'ada@example.com', 'fields_provided': 1})

        # When
        consent_manager.grant()

        # Then
        event = sink.events()[0]
        assert 'email' not in event
        assert event['fields_provided'] == 1

    def test_commerce_event_resets_ecommerce_first(self, emitter, consent_manager, sink):
        consent_manager.grant()

        emitter.emit_commerce(
            'add_to_cart',
            {'currency': 'USD', 'value': 799, 'items': [{'item_id': 'AA101-BIZ'}]},
            source=InteractionSource.AGENT,
        )

        assert sink.data_layer[-2] == {'ecommerce': None}
        pushed = sink.data_layer[-1]
        assert pushed['event'] == 'add_to_cart'
        assert pushed['ecommerce']['value'] == 799
        assert pushed['interaction_source'] == 'agent'
        assert pushed['consent_status'] == 'granted'

    def test_commerce_extra_is_scrubbed(self, emitter, consent_manager, sink):
        consent_manager.grant()

        emitter.emit_commerce('purchase', {'value': 10}, {'passenger_name': 'Ada', 'step': 2})

        pushed = sink.events()[-1]
        assert 'passenger_name' not in pushed
        assert pushed['step'] == 2

    def test_replay_keeps_original_source(self, emitter, consent_manager, sink):
        emitter.emit('agent_tool_used', source=InteractionSource.AGENT)
        emitter.emit('page_view')

        consent_manager.grant()

        sources = [event['interaction_source'] for event in sink.events()]
        assert sources == ['agent', 'human']
