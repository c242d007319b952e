"""radioctrl - client for the radio-browser.info station directory."""

__version__ = "0.1.0"
