"""Domain models and value types.

Plain, strict data structures (pydantic v2 and enums). The domain does not know
about HTTP, Rich or Typer.
"""
