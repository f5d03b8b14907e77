"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.consent_state import ConsentState
from src.service.shared_kernel.domain.enum.interaction_source import InteractionSource

__all__ = ['ConsentState', 'InteractionSource']
