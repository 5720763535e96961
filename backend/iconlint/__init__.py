"""iconlint — geometry and markup linter for single-path SVG icons."""

__version__ = "0.1.0"
