"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by the CLI and by commands.
- Inverts dependencies: the core depends on abstractions only.
"""
