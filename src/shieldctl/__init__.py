"""shieldctl — command layer of the shield coverage protocol."""

__version__ = "0.1.0"
