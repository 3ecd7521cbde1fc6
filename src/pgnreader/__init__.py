"""pgnreader: typed PGN tag and movetext parsing."""

__version__ = "0.1.0"
