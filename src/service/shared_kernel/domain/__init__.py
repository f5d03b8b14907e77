"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.enum import ConsentState, InteractionSource

__all__ = ['ConsentState', 'InteractionSource']
