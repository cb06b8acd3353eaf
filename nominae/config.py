"""
Generator config variables
"""

import logging
import os
from typing import Callable

import yaml

from .decorators import TRACE, with_logger

__all__ = ("TRACE", "ConfigurationStore", "config")


@with_logger
class ConfigurationStore:
    def __init__(self):
        """
        Change default values here.
        """
        self.LOG_LEVEL = "INFO"
        # Bounds on the number of fragments in a name. The upper bound is
        # exclusive unless both are equal.
        self.MIN_LENGTH = 2
        self.MAX_LENGTH = 5
        # How many names to print per invocation of the command line tool
        self.COUNT = 10
        # Seed for reproducible output. None uses the process wide source.
        self.SEED = None

        self._defaults = {
            key: value for key, value in vars(self).items() if key.isupper()
        }

        self._callbacks: dict[str, Callable] = {}
        self.refresh()

    def refresh(self) -> None:
        new_values = self._defaults.copy()

        config_file = os.getenv("CONFIGURATION_FILE")
        if config_file is not None:
            try:
                with open(config_file) as f:
                    loaded = yaml.safe_load(f)
            except FileNotFoundError:
                self._logger.warning(
                    "No configuration file found at %s",
                    config_file
                )
            else:
                if loaded is None:
                    self._logger.info(
                        "Configuration file at %s appears to be empty",
                        config_file
                    )
                elif not isinstance(loaded, dict):
                    self._logger.warning(
                        "Configuration file at %s is not a mapping, ignoring it",
                        config_file
                    )
                else:
                    new_values.update(loaded)

        triggered_callback_keys = tuple(
            key
            for key in new_values
            if key in self._callbacks
            and hasattr(self, key)
            and getattr(self, key) != new_values[key]
        )

        for key, new_value in new_values.items():
            old_value = getattr(self, key, None)
            if new_value != old_value:
                self._logger.info(
                    "New value for %s: %r -> %r", key, old_value, new_value
                )
            setattr(self, key, new_value)

        for key in triggered_callback_keys:
            self._callbacks[key]()

    def register_callback(self, key: str, callback: Callable) -> None:
        self._callbacks[key.upper()] = callback


def set_log_level():
    logger = logging.getLogger()
    logger.setLevel(config.LOG_LEVEL)


config = ConfigurationStore()
config.register_callback("LOG_LEVEL", set_log_level)
