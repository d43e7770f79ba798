"""An experimental job scheduler driven by second-resolution cron expressions."""

__version__ = "0.1.0"

__all__ = ["__version__"]