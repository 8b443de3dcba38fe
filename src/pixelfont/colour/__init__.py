"""Colour definitions"""
from .definition import BLACK, WHITE, Colour

__all__ = ["Colour", "WHITE", "BLACK"]
