"""Colour encodings, matrix layouts, pixel buffers and two-wire framing for addressable LED strips."""

__version__ = "0.1.0"