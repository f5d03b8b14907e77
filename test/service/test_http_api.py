"""
HTTP API tests

Drive the real app (DI container, routers, exception handlers) through
TestClient with session-only consent storage.
"""

import orjson
import pytest
from fastapi import status

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


pytestmark = pytest.mark.integration


def call_tool(client, name, params=None, *, human=False):
    headers = {'X-Interaction-Source': 'human'} if human else {}
    response = client.post(f'/api/tools/{name}', json=params, headers=headers)
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    return body, orjson.loads(body['content'][0]['text'])


class TestToolApi:
    def test_list_tools(self, client):
        response = client.get('/api/tools')

        assert response.status_code == status.HTTP_200_OK
        tools = {tool['name']: tool for tool in response.json()}
        assert len(tools) == 7
        assert 'inputSchema' in tools['select_seat']

    def test_agent_books_and_sees_activity(self, client):
        # When
        body, data = call_tool(client, 'add_to_booking', {'flight_id': 'AA101', 'class_id': 'AA101-ECO'})

        # Then
        assert 'isError' not in body
        assert data['added']['total'] == 299
        snapshot = client.get('/api/booking').json()
        assert snapshot['items'][0]['class'] == 'Economy'
        assert snapshot['items'][0]['added_by_agent'] is True
        assert snapshot['activities'][0]['tool'] == 'add_to_booking'

    def test_human_call_leaves_no_activity(self, client):
        call_tool(client, 'search_flights', {'from': 'JFK'}, human=True)

        snapshot = client.get('/api/booking').json()
        assert snapshot['has_searched'] is True
        assert snapshot['activities'] == []

    def test_tool_errors_are_still_200(self, client):
        body, data = call_tool(client, 'checkout', {'email': 'ada@example.com'})

        assert body['isError'] is True
        assert data['error'] == 'No flights in booking. Add a flight first.'

    def test_unknown_tool(self, client):
        body, data = call_tool(client, 'cancel_flight')

        assert body['isError'] is True
        assert 'available_tools' in data

    def test_non_object_body_is_error_response(self, client):
        body, data = call_tool(client, 'add_to_booking', ['AA101', 'AA101-ECO'])

        assert body['isError'] is True
        assert data['error'] == 'Invalid parameters'
        assert client.get('/api/booking').json()['items'] == []


class TestBookingApi:
    def test_empty_snapshot(self, client):
        response = client.get('/api/booking')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['items'] == []
        assert response.json()['total'] == 0
        assert response.json()['consent_state'] == 'pending'

    def test_remove_item(self, client):
        call_tool(client, 'add_to_booking', {'flight_id': 'AA205', 'class_id': 'AA205-BIZ'})

        response = client.delete('/api/booking/items/AA205-BIZ')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['items'] == []

    def test_remove_absent_item_is_404(self, client):
        response = client.delete('/api/booking/items/AA205-BIZ')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_clear_closes_checkout(self, client):
        call_tool(client, 'add_to_booking', {'flight_id': 'AA101', 'class_id': 'AA101-ECO'})
        call_tool(client, 'checkout', {'passenger_name': 'Ada Lovelace'})

        response = client.delete('/api/booking')

        snapshot = response.json()
        assert snapshot['items'] == []
        assert snapshot['checkout_open'] is False
        assert snapshot['checkout_prefill'] is None

    def test_dismiss_activity(self, client):
        call_tool(client, 'get_booking')
        activity_id = client.get('/api/booking').json()['activities'][0]['id']

        response = client.delete(f'/api/booking/activities/{activity_id}')

        assert response.json()['activities'] == []

    def test_seat_map(self, client):
        call_tool(client, 'select_seat', {'class_id': 'AA101-FIRST', 'seat': '3A'})

        response = client.get('/api/booking/seat-map/AA101-FIRST')

        assert response.status_code == status.HTTP_200_OK
        seat_map = response.json()
        assert seat_map['left_columns'] == ['A']
        assert seat_map['right_columns'] == ['B']
        assert [len(row) for row in seat_map['rows']] == [2, 2, 2]
        assert seat_map['rows'][0][0]['occupied'] is True
        assert seat_map['selected_seat'] == '3A'

    def test_seat_map_unknown_class_is_404(self, client):
        response = client.get('/api/booking/seat-map/AA999-ECO')

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestLogMasking:
    @pytest.fixture(autouse=True)
    def _capture_logs(self, monkeypatch):
        monkeypatch.setattr(settings, 'DEBUG', True)
        self.lines: list[str] = []
        sink_id = Logger.base.add(self.lines.append, level='DEBUG', format='{message}')
        yield
        Logger.base.remove(sink_id)

    def test_checkout_then_remove_keeps_passenger_data_out_of_logs(self, client):
        # Given
        call_tool(client, 'add_to_booking', {'flight_id': 'AA101', 'class_id': 'AA101-ECO'})
        call_tool(client, 'add_to_booking', {'flight_id': 'AA205', 'class_id': 'AA205-ECO'})
        call_tool(
            client,
            'checkout',
            {
                'passenger_name': 'Ada Lovelace',
                'email': 'ada@example.com',
                'card_number': '4111111111111111',
                'expiry': '12/28',
                'cvv': '123',
            },
        )

        # When
        response = client.delete('/api/booking/items/AA205-ECO')

        # Then
        assert response.json()['checkout_prefill']['name'] == 'Ada Lovelace'
        assert self.lines
        for secret in ('Ada Lovelace', 'ada@example.com', '4111 1111 1111 1111'):
            assert [line for line in self.lines if secret in line] == []


class TestConsentApi:
    def test_grant_then_second_decision_conflicts(self, client):
        # Given
        call_tool(client, 'get_booking')
        assert client.get('/api/consent').json()['pending_events'] == 1

        # When
        granted = client.post('/api/consent/grant')
        denied = client.post('/api/consent/deny')

        # Then
        assert granted.status_code == status.HTTP_200_OK
        assert granted.json()['consent_state'] == 'granted'
        assert granted.json()['pending_events'] == 0
        assert denied.status_code == status.HTTP_409_CONFLICT
        assert denied.json()['consent_state'] == 'granted'
        assert client.get('/api/booking').json()['consent_state'] == 'granted'

    def test_ask_consent_tool_after_ui_deny(self, client):
        client.post('/api/consent/deny')

        _, data = call_tool(client, 'ask_consent', {'decision': 'granted'})

        assert data['success'] is False
        assert client.get('/api/consent').json()['consent_state'] == 'denied'


class TestCartApi:
    def test_menu(self, client):
        response = client.get('/api/cart/menu')

        assert len(response.json()) == 10

    def test_add_accumulates_and_remove(self, client):
        client.post('/api/cart/items', json={'item_id': 'classic-whiz'})
        response = client.post('/api/cart/items', json={'item_id': 'classic-whiz', 'quantity': 2})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()['count'] == 3
        assert response.json()['total'] == 38.97

        removed = client.delete('/api/cart/items/classic-whiz')
        assert removed.json()['count'] == 0

    def test_add_unknown_item_is_404(self, client):
        response = client.post('/api/cart/items', json={'item_id': 'hoagie'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'available_items' in response.json()

    def test_zero_quantity_is_rejected(self, client):
        response = client.post('/api/cart/items', json={'item_id': 'fries', 'quantity': 0})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestCommonEndpoints:
    def test_health(self, client):
        assert client.get('/health').json()['status'] == 'healthy'

    def test_metrics_exposes_tool_counter(self, client):
        call_tool(client, 'get_consent')

        response = client.get('/metrics')

        assert 'agent_tool_invocations_total' in response.text
