"""ScriptForge: short-form video script generation API."""

__version__ = "0.1.0"
