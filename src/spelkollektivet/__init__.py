"""
Spelkollektivet - a text adventure about your first day in a coliving house.

This package provides:
- A command interpreter and world-rule engine for the house
- The bundled world definition
- A command-line interface to play it
"""

__version__ = "0.1.0"
