"""
Web application for the combination console.

The app is usually started through ``python -m vnest_console``; tests and
embedding code build it with ``create_app``.
"""

from .console_app import create_app

__all__ = ['create_app']
