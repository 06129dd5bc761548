"""Tests for logging setup."""

from __future__ import annotations

import importlib
import logging

import pytest
import structlog

import package_helper.logger
from package_helper.logger import setup_logging


class TestLogging:
    @pytest.fixture(autouse=True)
    def _reset(self):
        structlog.reset_defaults()
        yield
        structlog.reset_defaults()

    def test_import_keeps_host_configuration(self):
        host_processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=host_processors)

        importlib.reload(package_helper.logger)

        assert structlog.get_config()["processors"] == host_processors

    def test_import_does_not_configure_structlog(self):
        importlib.reload(package_helper.logger)
        assert not structlog.is_configured()

    def test_setup_logging_filters_below_level(self):
        setup_logging("WARNING")
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.WARNING)
