"""Background service brokering disposable mail aliases for the browser extension."""

__version__ = "0.1.0"
