"""Calculator with memory, a text command front end and a converter between bases 2 to 10."""

__version__ = "0.1.0"
__all__ = ["__version__"]