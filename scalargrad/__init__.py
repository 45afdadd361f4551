"""Scalar automatic differentiation (engine), small neural networks (nn) and a training command (cli)."""

__version__ = "0.1.0"
__all__ = ["engine", "nn", "cli"]