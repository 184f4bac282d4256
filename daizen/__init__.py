"""Static site generator with front matter, Markdown rendering, theme layouts and a build cache."""

__version__ = "0.1.0"