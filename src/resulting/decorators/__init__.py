"""Decorators: @catching."""

from resulting.decorators.catching import catching

__all__ = ['catching']
