"""Warriors, mages and weapons, with demo, generator and arena console commands."""

__version__ = "0.1.0"

__all__ = ["__version__"]