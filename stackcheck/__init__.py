"""Check two-stack sorting instruction sequences, with a bench summary, a terminal view and animations."""

__version__ = "0.1.0"
__all__ = ["__version__"]