"""Application support layer.

Classes:
    ConfigManager: QSettings wrapper for configuration.
"""

from radioctrl.core.config import ConfigManager

__all__ = ["ConfigManager"]
