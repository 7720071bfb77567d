#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_decorators.py
"""Unit tests for utility decorators.

Tests cover:
- Dependency checks before method execution
- Debug timing output

"""

import logging

import pytest

from asciimark.exceptions import DependencyError
from asciimark.utils.decorators import debug_timer, requires_dependencies


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for requires_dependencies."""

    def test_available_dependency_runs_method(self):
        """Test that the wrapped method runs when imports succeed."""

        @requires_dependencies("markdown", [("mistune", "mistune")])
        def parse(text):
            return text.upper()

        assert parse("ok") == "OK"

    def test_missing_dependency_raises(self):
        """Test that a missing package raises DependencyError with the ImportError chained."""

        @requires_dependencies("markdown", [("not-a-real-package", "not_a_real_package_xyz")])
        def parse(text):
            return text

        with pytest.raises(DependencyError) as exc_info:
            parse("x")

        assert exc_info.value.missing_packages == ["not-a-real-package"]
        assert isinstance(exc_info.value.__cause__, ImportError)

    def test_wraps_preserves_name(self):
        """Test that functools.wraps keeps the method metadata."""

        @requires_dependencies("markdown", [])
        def parse(text):
            """Parse text."""
            return text

        assert parse.__name__ == "parse"
        assert parse.__doc__ == "Parse text."


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_when_debug_enabled(self, caplog):
        """Test that the elapsed time is logged at DEBUG."""
        logger = logging.getLogger("asciimark.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="asciimark.tests.timer"):
            with debug_timer(logger, "Rendering"):
                pass
        assert "Rendering completed in" in caplog.text

    def test_silent_when_debug_disabled(self, caplog):
        """Test that nothing is logged above DEBUG."""
        logger = logging.getLogger("asciimark.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="asciimark.tests.timer_quiet"):
            with debug_timer(logger, "Rendering"):
                pass
        assert caplog.text == ""
