"""Command line interface for walruspy."""
from .main import app, main

__all__ = ['app', 'main']
