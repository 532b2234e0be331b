"""Personal expense tracker: expense records, a saved expense list, a session history and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["expense", "ledger", "history", "cli"]