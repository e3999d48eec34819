"""Parse LS_COLORS and EXA_COLORS definitions into terminal styles and themes."""

__version__ = "0.1.0"
__all__ = ["colour_vars", "default_theme", "lsc", "style", "theme", "ui_styles"]