"""
Helper decorators
"""

import logging

# Logging setup
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def with_logger(cls):
    """
    Add a `_logger` attribute to a class. The logger name will be the same as
    the class name.

    # Examples
    >>> @with_logger
    ... class Generator:
    ...    pass
    >>> assert Generator._logger.name == "Generator"
    """
    attr_name = "_logger"
    cls_name = cls.__qualname__
    setattr(cls, attr_name, logging.getLogger(cls_name))
    return cls
