"""Digest-gated file synchronization."""
