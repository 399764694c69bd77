"""Unit tests for the contextual logger."""

import logging

from twitteroauth.core.logging import LoggerConfigurator, logger


def test_dimensions_rendered_in_message(caplog):
    log = LoggerConfigurator.configure_logger("twitteroauth.tests", dimensions={"api_path": "x"})

    with caplog.at_level(logging.INFO, logger="twitteroauth.tests"):
        log.info("HTTP 200")

    assert caplog.records[-1].getMessage() == "HTTP 200 [api_path=x]"
    assert caplog.records[-1].api_path == "x"


def test_with_context_and_prefix_do_not_mutate_parent(caplog):
    child = logger.with_prefix("[Client] ").with_context(method="GET")

    with caplog.at_level(logging.INFO, logger="twitteroauth"):
        child.info("sent")
        logger.info("plain")

    messages = [r.getMessage() for r in caplog.records]
    assert "[Client] sent [method=GET]" in messages
    assert "plain" in messages
    assert logger.dimensions == {}
