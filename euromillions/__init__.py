"""EuroMillions statistical engine and draw generator."""

__version__ = "0.1.0"
