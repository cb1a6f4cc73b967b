import os
from typing import Optional

# System state
TESTING: bool = False
INITIALIZED: bool = False

CONFIG_FILENAME = "fencat.toml"

def get_config_dir() -> str:
    """
    Get the configuration directory path.

    :return: $FENCAT_CONFIG_DIR if set, otherwise ~/.config/fencat
    """
    override = os.getenv('FENCAT_CONFIG_DIR')
    if override:
        return override
    return os.path.join(os.path.expanduser('~'), '.config', 'fencat')

def get_log_dir() -> str:
    """
    Get the log directory path.

    :return: $FENCAT_LOG_DIR if set, otherwise ~/.cache/fencat/logs
    """
    override = os.getenv('FENCAT_LOG_DIR')
    if override:
        return override
    return os.path.join(os.path.expanduser('~'), '.cache', 'fencat', 'logs')

CONFIG_DIR = get_config_dir()
LOG_DIR = get_log_dir()

def init_testing(test_dir: Optional[str] = None) -> None:
    """
    Initialize system for testing mode.

    :param test_dir: Optional directory used for both config and logs
    """
    global TESTING, INITIALIZED, CONFIG_DIR, LOG_DIR
    TESTING = True
    INITIALIZED = True
    if test_dir:
        CONFIG_DIR = os.path.join(test_dir, "config")
        LOG_DIR = os.path.join(test_dir, "logs")

def init_production() -> None:
    """Initialize system for normal command line use."""
    global TESTING, INITIALIZED, CONFIG_DIR, LOG_DIR
    TESTING = False
    INITIALIZED = True
    CONFIG_DIR = get_config_dir()
    LOG_DIR = get_log_dir()

def reset() -> None:
    """Reset to uninitialized state (primarily for testing)."""
    global TESTING, INITIALIZED, CONFIG_DIR, LOG_DIR
    TESTING = False
    INITIALIZED = False
    CONFIG_DIR = get_config_dir()
    LOG_DIR = get_log_dir()
