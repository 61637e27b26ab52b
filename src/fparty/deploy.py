"""Restart hook for deployed instances.

The application server watches a sentinel file and restarts the process
when its mtime changes.
"""

import logging
from pathlib import Path

from fparty.config import DeployConfig

logger = logging.getLogger(__name__)


def restart_file_path(config: DeployConfig) -> Path:
    return config.app_dir / config.restart_file


def touch_restart_file(config: DeployConfig) -> Path:
    """Touch the restart sentinel, creating it and its parents if needed.

    Args:
        config: Deployment configuration

    Returns:
        Path of the touched file
    """
    path = restart_file_path(config)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    logger.info(f"Touched restart file {path}")
    return path
