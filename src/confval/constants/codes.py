"""Stable error codes produced by the validation gates and the shipped rules."""

from __future__ import annotations

CV001: str = "CV001"  # document not found
CV002: str = "CV002"  # document is not valid JSON
VC003: str = "VC003"  # document fails schema conformance

CV004: str = "CV004"  # location must be Washington
CV005: str = "CV005"  # first name too short
CV006: str = "CV006"  # last name too short

GATE_CODES: tuple[str, ...] = (CV001, CV002, VC003)

SAMPLE_RULE_CODES: tuple[str, ...] = (CV004, CV005, CV006)
