"""CuraLink relevance engine: match scoring and recommendation ranking."""

__version__ = "0.1.0"
