"""Tool settings loaded from ``confval.yaml``."""

from .loader import load_settings
from .model import ValidatorSettings

__all__ = ["ValidatorSettings", "load_settings"]
