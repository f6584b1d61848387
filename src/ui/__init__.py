"""
UI Package for Minefield
Console front end over the minefield engine
"""

from .console import MinefieldConsole

__all__ = ['MinefieldConsole']
