"""Core of the SDK: settings, errors, logging and domain models.

Nothing here performs I/O.
"""
