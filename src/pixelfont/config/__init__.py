"""Configuration constants"""
from .settings import *
