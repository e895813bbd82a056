"""
Zone Engine - фазы хоста, цикл бара и клика
"""

from .zone_engine import ZoneEngine

__all__ = ['ZoneEngine']
