"""Graph capabilities and adapters.

This package defines the read-only reader protocols (`readers`) the
algorithms depend on and NetworkX-backed implementations of them
(`nx_readers`).
"""
