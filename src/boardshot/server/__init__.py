"""
Boardshot inference server

FastAPI backend for the desktop client.
"""

from .app import create_app, main, run_server

__all__ = ["create_app", "main", "run_server"]
