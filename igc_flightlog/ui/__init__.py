"""
User interface package for IGC Flight Log.
"""

from .cli import CLI, create_cli

__all__ = ['CLI', 'create_cli']
