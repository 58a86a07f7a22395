"""HideField Core - Shared utilities and infrastructure.

Import specific functions from submodules:
    from hidefield.core.config import ConfigManager
    from hidefield.core import constants
    from hidefield.core.logging import Logger
    from hidefield.core import validators
"""

from hidefield.core import config, constants, logging, validators

__all__ = [
    "config",
    "constants",
    "logging",
    "validators",
]
