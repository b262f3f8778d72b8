"""Watch a working tree, commit changed files in batches and push them."""

__version__ = "1.0.0"
