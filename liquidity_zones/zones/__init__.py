"""
Zones - модели зон, фабрика, реестр и выбор зоны
"""

from .models import Side, ZoneLabel, StyleTokens, ZoneProfile, Zone
from .factory import create_zone, compute_zone_band
from .registry import ZoneRegistry, is_expired, is_accepted
from .selector import ZoneSelector

__all__ = [
    'Side',
    'ZoneLabel',
    'StyleTokens',
    'ZoneProfile',
    'Zone',
    'create_zone',
    'compute_zone_band',
    'ZoneRegistry',
    'is_expired',
    'is_accepted',
    'ZoneSelector'
]
