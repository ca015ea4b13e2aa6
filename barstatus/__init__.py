"""Status line generation for minimal window managers: system probes and command blocks."""

__version__ = "1.0.0"
__all__ = ["__version__"]