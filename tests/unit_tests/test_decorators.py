import logging

from nominae.decorators import with_logger
from nominae.totro import NameGenerator


def test_with_logger():
    @with_logger
    class TestClass:
        pass
    assert isinstance(TestClass()._logger, logging.Logger)
    assert TestClass._logger.name.endswith("TestClass")


def test_generator_has_logger():
    assert NameGenerator._logger.name == "NameGenerator"
