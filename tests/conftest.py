"""Shared pytest fixtures and configuration for the flagparse test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no mocking.
* CLI tests drive ``main`` with explicit argv lists.
* Files are only ever written under ``tmp_path``.
"""

from __future__ import annotations
