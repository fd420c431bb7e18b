"""Form controls."""

from .slug import SlugConfig, SlugControl, make_slug_factory

__all__ = ['SlugConfig', 'SlugControl', 'make_slug_factory']
