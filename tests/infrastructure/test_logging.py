"""Tests for the logging setup."""

import logging

import pytest

from shop.infrastructure.logging import configure_logging


def test_sets_root_level():
    configure_logging("info")
    assert logging.getLogger().level == logging.INFO


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
