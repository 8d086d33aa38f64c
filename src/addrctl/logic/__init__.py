"""Logic layer — parsing, commands, undo tracking, and orchestration.

Logic may import from domain and infrastructure layers.
It must never import from commands, output, or config.
Shared exception types live in :mod:`addrctl.errors`.
"""
