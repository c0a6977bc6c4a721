"""Vectors, matrices, quaternions, colours, base64 and on-screen text bookkeeping for graphics code."""

__version__ = "0.1.0"