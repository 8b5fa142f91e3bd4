"""Widget models rendered as HTML: boids, Game of Life, keyed lists, Markdown, counter and CRM."""

__version__ = "0.1.0"