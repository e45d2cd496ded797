"""
Configuration package for IGC Flight Log.
Contains settings and constants used across the application.
"""

from .constants import *
from .settings import Settings, settings

__all__ = ['Settings', 'settings']
