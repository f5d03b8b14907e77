from prometheus_client import Counter, Gauge


class AgentMetrics:
    """
    Booking Core Metrics Collector

    Tracks how agents use the tool protocol and what happens to analytics
    events at the consent gate
    """

    def __init__(self):
        # ========== Tool Protocol Metrics ==========
        self.tool_invocations = Counter(
            'agent_tool_invocations_total',
            'Total tool invocations',
            ['tool', 'source', 'result'],  # result: success/error
        )

        # ========== Analytics / Consent Metrics ==========
        self.analytics_events = Counter(
            'analytics_events_total',
            'Analytics events by consent gate outcome',
            ['outcome'],  # outcome: sent/buffered/dropped/failed
        )

        self.consent_decisions = Counter(
            'consent_decisions_total',
            'Consent decisions taken',
            ['decision'],
        )

        self.analytics_buffer_size = Gauge(
            'analytics_buffer_size',
            'Events waiting for a consent decision',
        )

    # ========== Helper Methods ==========

    def record_tool_invocation(self, *, tool: str, source: str, success: bool):
        self.tool_invocations.labels(
            tool=tool, source=source, result='success' if success else 'error'
        ).inc()

    def record_analytics_event(self, *, outcome: str):
        self.analytics_events.labels(outcome=outcome).inc()

    def record_consent_decision(self, *, decision: str):
        self.consent_decisions.labels(decision=decision).inc()

    def set_buffer_size(self, size: int):
        self.analytics_buffer_size.set(size)


# Global metrics instance
metrics = AgentMetrics()
