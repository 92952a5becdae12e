"""Small programs and libraries for text, images, HTTP, JSON, compression and equality."""

__version__ = "0.1.0"