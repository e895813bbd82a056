"""
Utils - Вспомогательные инструменты
"""

from .tick_tools import round_to_tick, tick_decimals, ticks_to_price
from .formatting import format_volume, format_zone_label, format_selection_summary

__all__ = [
    'round_to_tick',
    'tick_decimals',
    'ticks_to_price',
    'format_volume',
    'format_zone_label',
    'format_selection_summary'
]
