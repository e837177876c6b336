"""Forward-mode automatic differentiation with nested dual numbers."""

__version__ = "0.1.0"
__all__ = ["dual", "functions", "orders"]