"""Integer range sets, nested identifiers, sequence helpers and a websocket relay."""

__version__ = "0.1.0"