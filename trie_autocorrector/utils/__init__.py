# trie_autocorrector/utils/__init__.py
# logging, config and metrics helpers

from .config_manager import Config
from .logger_utils import Log, configure_logging
from .metrics_tracker import Metrics, QueryStats

__all__ = ["Config", "Log", "configure_logging", "Metrics", "QueryStats"]
