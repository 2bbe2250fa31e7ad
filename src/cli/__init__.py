"""Command line layer (Typer + Rich).

Translates flags into request commands and renders results; no HTTP here.
"""
