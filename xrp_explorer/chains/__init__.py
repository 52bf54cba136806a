"""Ledger chain clients."""
