# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dictionary": "dictionary.txt",
    "max_dist": 2,  # edit distance ceiling for suggestions
    "max_suggestions": 5,
    "prune": False,  # prefix-level pruning during fuzzy search
    "benchmark_queries": 1000,
    "log_level": "INFO",
}

# smallest accepted value for numeric options
MINIMUMS = {
    "max_dist": 0,
    "max_suggestions": 1,
    "benchmark_queries": 1,
}


class Config:
    """
    Settings for the corrector and CLI, backed by an optional JSON file.
    A missing file means defaults; a broken one is logged and ignored.
    """

    def __init__(self, path=None):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read config %s: %s (using defaults)", self.path, e)
            return

        if not isinstance(raw, dict):
            logger.warning("Config %s is not a JSON object (using defaults)", self.path)
            return

        for key, val in raw.items():
            if key not in self.data:
                logger.warning("Unknown config option %r ignored", key)
                continue
            try:
                self.set(key, val, save=False)
            except (TypeError, ValueError) as e:
                logger.warning("Bad value for %r in %s: %s", key, self.path, e)

    def save(self):
        if not self.path:
            raise ValueError("Config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self):
        return "\n".join(f"{k:18} = {v}" for k, v in self.data.items())

    def set(self, key, val, save=True):
        """
        Set an option, cast to the type of its default.
        Unknown keys raise KeyError, out-of-range numbers raise ValueError.
        """
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        val = kind(val)
        low = MINIMUMS.get(key)
        if low is not None and val < low:
            raise ValueError(f"{key} must be >= {low}, got {val}")
        self.data[key] = val
        if save and self.path:
            self.save()

    def update(self, **overrides):
        """Apply overrides in memory, skipping None (unset CLI flags)."""
        for key, val in overrides.items():
            if val is not None:
                self.set(key, val, save=False)
