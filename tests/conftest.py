"""Pytest configuration and shared fixtures for the slug control tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from form_slug import ControlRegistry, Form, RegistrationGuard, SlugControl, TemplateFactory
from form_slug.registry import default_guard, default_registry


@pytest.fixture(autouse=True)
def reset_default_registration():
    """Give every test a fresh process-wide guard and registry."""
    default_guard.reset()
    default_registry.clear()
    yield
    default_guard.reset()
    default_registry.clear()


@pytest.fixture
def template_factory():
    return TemplateFactory()


@pytest.fixture
def control(template_factory):
    return SlugControl(template_factory, "Slug")


@pytest.fixture
def guard():
    return RegistrationGuard()


@pytest.fixture
def registry():
    return ControlRegistry()


@pytest.fixture
def form(registry):
    return Form("post", registry=registry)
