"""An interactive POSIX shell with line editing, on-disk history and built-in cd, pwd and echo."""

__version__ = "0.1.0"
__all__ = ["__version__"]