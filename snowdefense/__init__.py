"""Terminal tower-defence game on a snowy field: units, board rules, saves, display and play."""

__version__ = "1.0.0"