"""A small interactive shell with built-in echo, pwd, cd, env and exit."""

__version__ = "0.1.0"
__all__ = ["__version__"]