"""Test doubles for the slug control."""

from tests.fixtures.fakes import CountingTemplateFactory, FakeField, extract_settings

__all__ = [
    'CountingTemplateFactory',
    'FakeField',
    'extract_settings',
]
