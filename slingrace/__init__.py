"""slingrace — slingshot racing client with an SVG track import pipeline."""

__version__ = "0.1.0"
