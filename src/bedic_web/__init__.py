"""JSON API for the dictionary engine."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
