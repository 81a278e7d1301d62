import logging

from lofistart.log import PACKAGE_LOGGER, LogConfig, setup_logging


def test_setup_logging_configures_package_logger_only():
    root_handlers = list(logging.getLogger().handlers)
    pkg = setup_logging(LogConfig(level="info", no_color=True))
    assert pkg.name == PACKAGE_LOGGER
    assert pkg.level == logging.INFO
    assert pkg.propagate is False
    assert len(pkg.handlers) == 1
    assert pkg.handlers[0].formatter._fmt == "%(levelname)s %(name)s: %(message)s"
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_replaces_previous_handler():
    first = setup_logging(LogConfig(no_color=True)).handlers[0]
    pkg = setup_logging(LogConfig(level="bogus", no_color=True))
    assert pkg.handlers != [first]
    assert len(pkg.handlers) == 1
    assert pkg.level == logging.WARNING
