"""Text composition"""
from .writer import Writer

__all__ = ["Writer"]
