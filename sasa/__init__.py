"""Audio spectrum analysis with logarithmic bins and a terminal text display."""

__version__ = "0.1.0"
__all__ = ["analyzer", "config", "display"]