"""Configuration manager using QSettings for persistent storage."""

import logging

from PySide6.QtCore import QSettings

from radioctrl.api.query import StationQuery
from radioctrl.api.resolver import API_HOSTNAME
from radioctrl.api.transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# API
_KEY_HOSTNAME = "api/hostname"
_KEY_TIMEOUT = "api/timeout"

# Search defaults
_KEY_ORDER = "search/order"
_KEY_REVERSE = "search/reverse"
_KEY_LIMIT = "search/limit"
_KEY_HIDE_BROKEN = "search/hide_broken"

# Last search
_KEY_LAST_QUERY = "search/last_query"
_KEY_LAST_TERM = "search/last_term"

_DEFAULT_ORDER = "votes"
_DEFAULT_LIMIT = 100


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    QSettings stores config in platform-specific locations:
    - Windows: HKEY_CURRENT_USER\\Software\\radioctrl\\radioctrl
    - macOS: ~/Library/Preferences/com.radioctrl.radioctrl.plist
    - Linux: ~/.config/radioctrl/radioctrl.conf

    Example:
        config = ConfigManager()
        limit = config.get_limit()
        config.set_last_search(StationQuery.BY_TAG, "jazz")
    """

    def __init__(self, organization: str = "radioctrl", application: str = "radioctrl") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- API settings ----------------------------------------------------------

    def get_hostname(self) -> str:
        """Return the directory hostname to resolve.

        Returns:
            Hostname (default all.api.radio-browser.info).
        """
        value = self._settings.value(_KEY_HOSTNAME, API_HOSTNAME, str)
        return str(value).strip() if value else API_HOSTNAME

    def set_hostname(self, hostname: str) -> None:
        """Set the directory hostname.

        Args:
            hostname: DNS name, or empty string for the default.
        """
        self._settings.setValue(_KEY_HOSTNAME, hostname.strip())

    def get_timeout(self) -> float:
        """Return the HTTP request timeout in seconds.

        Returns:
            Timeout in seconds (default 10).
        """
        value = self._settings.value(_KEY_TIMEOUT, DEFAULT_TIMEOUT, float)
        try:
            timeout = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid timeout setting: %r", value)
            return DEFAULT_TIMEOUT
        return max(1.0, min(60.0, timeout))

    def set_timeout(self, seconds: float) -> None:
        """Set the HTTP request timeout.

        Args:
            seconds: Timeout in seconds (1-60).
        """
        self._settings.setValue(_KEY_TIMEOUT, max(1.0, min(60.0, seconds)))

    # -- Search defaults -------------------------------------------------------

    def get_order(self) -> str:
        """Return the default sort field (default "votes")."""
        value = self._settings.value(_KEY_ORDER, _DEFAULT_ORDER, str)
        return str(value) if value else _DEFAULT_ORDER

    def set_order(self, order: str) -> None:
        """Set the default sort field."""
        self._settings.setValue(_KEY_ORDER, order)

    def get_reverse(self) -> bool:
        """Return whether results are sorted in reverse (default True)."""
        return bool(self._settings.value(_KEY_REVERSE, True, bool))

    def set_reverse(self, reverse: bool) -> None:
        """Set reverse sorting."""
        self._settings.setValue(_KEY_REVERSE, reverse)

    def get_limit(self) -> int:
        """Return the default result limit.

        Returns:
            Limit (default 100, clamped to 1-1000).
        """
        value = self._settings.value(_KEY_LIMIT, _DEFAULT_LIMIT, int)
        return max(1, min(1000, int(value)))  # type: ignore[arg-type]

    def set_limit(self, limit: int) -> None:
        """Set the default result limit.

        Args:
            limit: Maximum results per search (1-1000).
        """
        self._settings.setValue(_KEY_LIMIT, max(1, min(1000, limit)))

    def get_hide_broken(self) -> bool:
        """Return whether broken stations are hidden (default True)."""
        return bool(self._settings.value(_KEY_HIDE_BROKEN, True, bool))

    def set_hide_broken(self, hide: bool) -> None:
        """Set whether broken stations are hidden."""
        self._settings.setValue(_KEY_HIDE_BROKEN, hide)

    # -- Last search -----------------------------------------------------------

    def get_last_query(self) -> StationQuery:
        """Return the query kind of the last search.

        Returns:
            StationQuery, or ALL if unset or unknown.
        """
        value = self._settings.value(_KEY_LAST_QUERY, "", str)
        if not value:
            return StationQuery.ALL
        try:
            return StationQuery.from_string(str(value))
        except ValueError:
            logger.warning("Ignoring unknown saved query kind: %r", value)
            return StationQuery.ALL

    def get_last_term(self) -> str:
        """Return the search term of the last search."""
        value = self._settings.value(_KEY_LAST_TERM, "", str)
        return str(value) if value else ""

    def set_last_search(self, query: StationQuery, term: str) -> None:
        """Remember the last search.

        Args:
            query: Query kind used.
            term: Search term used.
        """
        self._settings.setValue(_KEY_LAST_QUERY, query.name.lower())
        self._settings.setValue(_KEY_LAST_TERM, term)

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
