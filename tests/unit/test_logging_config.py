"""Tests for loguru setup."""

import logging
from collections.abc import Iterator

import pytest
from loguru import logger

from tumblr_api.logging_config import configure_logging


@pytest.fixture
def captured() -> Iterator[list[str]]:
    configure_logging(verbose=True)
    messages: list[str] = []
    sink_id = logger.add(messages.append, format="{level} {message}")
    yield messages
    logger.remove(sink_id)
    logging.basicConfig(handlers=[], force=True)


def test_stdlib_records_are_forwarded(captured: list[str]) -> None:
    logging.getLogger("urllib3.connectionpool").debug("Starting new HTTPS connection")

    assert any(
        m.startswith("DEBUG urllib3.connectionpool: Starting new HTTPS connection")
        for m in captured
    )


def test_quiet_mode_drops_stdlib_debug() -> None:
    configure_logging(verbose=False)
    messages: list[str] = []
    sink_id = logger.add(messages.append, format="{message}")
    try:
        logging.getLogger("urllib3.connectionpool").debug("hidden")
    finally:
        logger.remove(sink_id)
        logging.basicConfig(handlers=[], force=True)

    assert messages == []
