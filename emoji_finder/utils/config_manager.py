# config_manager.py - JSON config manager

import json
import logging
import os
from typing import List

from emoji_finder.core.errors import ConfigurationError
from emoji_finder.core.grid import validate_columns
from emoji_finder.core.ranking import RANKINGS
from emoji_finder.utils.logger_utils import DEFAULT_LOG_PATH, LEVELS

logger = logging.getLogger(__name__)

DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".config", "emoji_finder", "config.json")
OUTPUTS = ("clipboard", "stdout")


class Config:
    def __init__(self, path=None):
        self.path = path or DEFAULT_PATH
        self.data = {
            "columns": 10,  # grid width
            "output": "clipboard",  # where a picked emoji goes
            "ranking": "popularity",
            "dataset": "",  # empty = bundled dataset
            "cache_size": 256,
            "log_level": "INFO",
            "log_file": str(DEFAULT_LOG_PATH),
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("ignoring config %s: top level is not an object", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("unknown config key %r in %s", k, self.path)
                continue
            self.data[k] = v
        logger.debug("loaded config from %s", self.path)

    def __getitem__(self, key):
        return self.data[key]

    def save(self):
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self) -> List[str]:
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def validate(self):
        """Check every value that has a constraint. Raises ConfigurationError."""
        validate_columns(self.data["columns"])
        if self.data["output"] not in OUTPUTS:
            raise ConfigurationError(f"output must be one of {OUTPUTS}, got {self.data['output']!r}")
        if self.data["ranking"] not in RANKINGS:
            raise ConfigurationError(f"unknown ranking {self.data['ranking']!r}")
        cache = self.data["cache_size"]
        if isinstance(cache, bool) or not isinstance(cache, int) or cache < 0:
            raise ConfigurationError(f"cache_size must be a non-negative integer, got {cache!r}")
        if str(self.data["log_level"]).upper() not in LEVELS:
            raise ConfigurationError(f"log_level must be one of {LEVELS}, got {self.data['log_level']!r}")

    def set(self, key, val):
        if key not in self.data:
            raise ConfigurationError(f"no such option: {key}")
        old = self.data[key]
        try:
            self.data[key] = type(old)(val)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"bad value for {key}: {val!r}") from e
        try:
            self.validate()
        except ConfigurationError:
            self.data[key] = old
            raise
        self.save()
