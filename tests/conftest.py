"""Pytest configuration and shared fixtures for asciimark test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture(autouse=True)
def no_debug_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ASCIIMARK_DEBUG from leaking into option defaults."""
    monkeypatch.delenv("ASCIIMARK_DEBUG", raising=False)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a sample document exercising cross-references.

    Returns
    -------
    str
        Markdown text with labels, relative references and nested lists.

    """
    return """# Introduction [label:intro]

This document shows **bold** text and a [link](https://example.com).

## Scope

See [ref:intro].

## Details

1. First step [label:first]
2. Second step, after [ref:-]
   1. Nested step [label:nested]

Back to [ref:first] and [ref:nested].
"""
