"""zonegeo: geometric validation and metrics for map zones."""

__version__ = "0.1.0"
