"""Hosted control plane capacity sizing calculator."""

__version__ = "0.1.0"
