"""Air-quality sensor models, per-gas averages, sensor similarity and console menus."""

__version__ = "0.1.0"
__all__ = ["__version__"]