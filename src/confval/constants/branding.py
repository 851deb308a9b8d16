"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "confval"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate JSON configuration files against a schema and business rules"
