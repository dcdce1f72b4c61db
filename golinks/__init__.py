"""Go links: memorable short aliases for long URLs."""

__version__ = "1.0.0"
