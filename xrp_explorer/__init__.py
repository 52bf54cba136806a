"""Read-only XRP wallet explorer: balance, recent activity and fiat value."""

__version__ = "0.1.0"
