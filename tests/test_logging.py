import logging

from extractor.utils.logging import PACKAGE_LOGGER, configure_logging, get_logger


def test_loggers_are_namespaced() -> None:
    assert get_logger().name == PACKAGE_LOGGER
    assert get_logger("registry").name == "extractor.registry"
    assert get_logger("extractor.registry") is get_logger("registry")


def test_null_handler_installed_once() -> None:
    get_logger("a")
    get_logger("b")
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1


def test_configure_logging_sets_package_level() -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous = logger.level
    try:
        assert configure_logging("DEBUG") is logger
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
