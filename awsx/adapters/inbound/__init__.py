"""Inbound adapters - CLI and Lambda hosts."""
