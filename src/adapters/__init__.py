"""Adapters to the outside world: the TER HTTP API and extension files on disk."""
