"""gitbook2latex - turn a GitBook directory into a single LaTeX book."""

__version__ = "0.1.0"
