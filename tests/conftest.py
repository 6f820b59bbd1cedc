"""Pytest configuration and shared fixtures for the ubb2html test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from ubb2html import UbbParser, api
from ubb2html.context import RenderContext
from ubb2html.handlers import build_default_registry
from ubb2html.options import ParseOptions

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "security: Tests for escaping and URL safety")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture
def parser() -> UbbParser:
    """Provide a parser with the built-in handlers and no converter."""
    return UbbParser()


@pytest.fixture
def render_context() -> RenderContext:
    """Provide a top-level render context with default options."""
    return RenderContext(options=ParseOptions(), registry=build_default_registry())


@pytest.fixture
def restore_default_parser() -> Generator[UbbParser, None, None]:
    """Restore the module-level parser's registry and converter after a test.

    Yields
    ------
    UbbParser
        The shared default parser

    """
    default = api.default_parser
    saved_registry = default.registry.copy()
    saved_converter = default.file_url_converter
    try:
        yield default
    finally:
        default.registry = saved_registry
        default.set_file_url_converter(saved_converter)
