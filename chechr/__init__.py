"""HTTP health-check service comparing CPU load and RAM usage with thresholds."""

__version__ = "0.1.0"
__all__ = ["__version__"]