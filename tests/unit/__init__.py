"""
Unit tests that mirror the source code structure.

Tests individual components in isolation with in-memory backends.
"""
