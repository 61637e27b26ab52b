"""fparty - Fairytale Party static site."""

__version__ = "0.1.0"
