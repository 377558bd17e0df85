"""blogseo command-line interface."""
