"""
Feed - источники объёмов и воспроизведение баров
"""

from .volume_source import read_volume, read_bid_ask
from .replay_feed import ReplayFeed, BarInput

__all__ = [
    'read_volume',
    'read_bid_ask',
    'ReplayFeed',
    'BarInput'
]
