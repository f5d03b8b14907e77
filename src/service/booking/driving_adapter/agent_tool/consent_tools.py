"""
Consent Tools

get_consent tells the agent where the analytics consent decision stands and
what to do next; ask_consent records the user's answer. Once a decision
exists it is final, and the instructions say so to stop agents from asking
again.
"""

from typing import Any

from src.platform.logging.loguru_io import Logger
from src.service.analytics.app.analytics_emitter import AnalyticsEmitter
from src.service.analytics.app.consent_manager import ConsentManager
from src.service.booking.domain.aggregate.booking_store import BookingStore
from src.service.booking.domain.enum.tool_name import ToolName
from src.service.booking.driving_adapter.agent_tool.booking_tools import AGENT_TOOL_USED
from src.service.booking.driving_adapter.agent_tool.tool_registry import ToolDefinition
from src.service.booking.driving_adapter.agent_tool.tool_schema import (
    AskConsentParams,
    GetConsentParams,
)
from src.service.shared_kernel.domain.enum.consent_state import ConsentState
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource


PENDING_INSTRUCTION = (
    'Consent has not been decided. Ask the user whether they allow anonymous usage analytics, '
    "then call ask_consent with decision 'granted' or 'denied'."
)
DECIDED_INSTRUCTION = (
    'Consent has already been decided and cannot be changed in this session. '
    'Do not ask the user again.'
)


class ConsentTools:
    def __init__(
        self,
        *,
        consent_manager: ConsentManager,
        store: BookingStore,
        emitter: AnalyticsEmitter,
    ) -> None:
        self.consent_manager = consent_manager
        self.store = store
        self.emitter = emitter

    def definitions(self) -> list[ToolDefinition]:
        return [
            ToolDefinition(
                name=ToolName.GET_CONSENT,
                description=(
                    'Report the analytics consent state (pending, granted or denied) and the '
                    'next step to take.'
                ),
                params_model=GetConsentParams,
                handler=self.get_consent,
            ),
            ToolDefinition(
                name=ToolName.ASK_CONSENT,
                description=(
                    "Record the user's answer to the analytics consent question. Only valid "
                    'while consent is pending.'
                ),
                params_model=AskConsentParams,
                handler=self.ask_consent,
            ),
        ]

    @Logger.io
    def get_consent(self, params: GetConsentParams, *, source: InteractionSource) -> dict[str, Any]:
        state = self.consent_manager.get_state()

        if source is InteractionSource.AGENT:
            self.store.add_activity(
                tool=ToolName.GET_CONSENT,
                message='Agent checked analytics consent',
                detail=f'Consent is {state}',
            )
        self.emitter.emit(
            AGENT_TOOL_USED,
            {'tool_name': ToolName.GET_CONSENT.value, 'consent_state': state.value},
            source=source,
        )

        return {
            'consent_state': state.value,
            'consent_timestamp': self.consent_manager.get_timestamp(),
            'instruction': DECIDED_INSTRUCTION if state.is_decided else PENDING_INSTRUCTION,
        }

    @Logger.io
    def ask_consent(self, params: AskConsentParams, *, source: InteractionSource) -> dict[str, Any]:
        current = self.consent_manager.get_state()
        if current.is_decided:
            return {
                'success': False,
                'consent_state': current.value,
                'message': DECIDED_INSTRUCTION,
            }

        decision = ConsentState(params.decision)
        if decision is ConsentState.GRANTED:
            self.consent_manager.grant()
        else:
            self.consent_manager.deny()

        if source is InteractionSource.AGENT:
            self.store.add_activity(
                tool=ToolName.ASK_CONSENT,
                message='Agent recorded analytics consent',
                detail=f'User {decision} analytics',
            )
        # Sent right away after a grant, dropped after a denial
        self.emitter.emit(
            AGENT_TOOL_USED,
            {'tool_name': ToolName.ASK_CONSENT.value, 'decision': decision.value},
            source=source,
        )

        return {'success': True, 'consent_state': decision.value}
