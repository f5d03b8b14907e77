"""Interaction Source Enum"""

from enum import StrEnum


class InteractionSource(StrEnum):
    """Who performed an action: the human UI or an AI agent via the tool protocol"""

    HUMAN = 'human'
    AGENT = 'agent'
