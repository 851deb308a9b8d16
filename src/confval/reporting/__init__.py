"""Human-readable reporting."""

from .stdout import StdoutReporter, render_catalog

__all__ = ["StdoutReporter", "render_catalog"]
