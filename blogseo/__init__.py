"""blogseo — blog content extraction and structure scoring."""

__version__ = "0.1.0"
