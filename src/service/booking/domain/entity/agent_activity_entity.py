from datetime import datetime
from typing import Any, Optional

import attrs

from src.service.booking.domain.enum.tool_name import ToolName


@attrs.frozen
class AgentActivity:
    """A toast in the activity feed describing one tool call"""

    id: str
    tool: ToolName
    message: str
    timestamp: datetime
    detail: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'tool': self.tool.value,
            'message': self.message,
            'detail': self.detail,
            'timestamp': self.timestamp.isoformat(),
        }
