"""Shared constants and utilities used by both scripts and tests.

This package provides a location for synthetic grid builders that need to be
shared across packages without creating circular imports.
"""

from __future__ import annotations
