"""Core: domain models, settings, errors, services and command definitions."""
