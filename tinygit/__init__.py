"""A tiny file-based version control tool: repository, commits, branches and a command line."""

__version__ = "0.1.0"
__all__ = ["__version__"]