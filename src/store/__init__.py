"""Recall storage layer.

This module writes the SQLite recall store and serves read queries
against it. It also exposes the SDK client used by the CLI.
"""
