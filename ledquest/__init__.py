"""Game rules and state for a dungeon adventure played on an 8x8 LED grid."""

__version__ = "0.1.0"
__all__ = ["__version__"]