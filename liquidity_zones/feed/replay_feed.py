# liquidity_zones/feed/replay_feed.py

from collections import namedtuple
from pathlib import Path

import pandas as pd

REQUIRED_COLUMNS = ['close', 'bid_volume', 'ask_volume']

BarInput = namedtuple("BarInput", ["index", "close", "bid_volume", "ask_volume"])


class ReplayFeed:
    """
    Воспроизведение закрытых баров из DataFrame/CSV.

    Одновременно является источником объёмов для ZoneEngine:
    get_current_bid_volume() / get_current_ask_volume() читают текущий бар.
    """

    def __init__(self, df):
        if df is None:
            raise ValueError("Replay data is empty")

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Replay data is missing columns: {missing}")

        if 'timestamp' in df.columns:
            df = df.sort_values('timestamp')
        df = df.reset_index(drop=True)

        df['close'] = pd.to_numeric(df['close'], errors='coerce')
        # пустые/битые объёмы останутся NaN и будут прочитаны как 0
        df['bid_volume'] = pd.to_numeric(df['bid_volume'], errors='coerce')
        df['ask_volume'] = pd.to_numeric(df['ask_volume'], errors='coerce')

        self.df = df
        self.position = -1

    @classmethod
    def from_csv(cls, path):
        path = Path(path)
        if not path.exists():
            raise ValueError(f"Replay CSV not found: {path}")
        return cls(pd.read_csv(path))

    def __len__(self):
        return len(self.df)

    def bars(self):
        """Итерирует бары по порядку, сдвигая текущую позицию источника объёмов"""
        for row in self.df.itertuples():
            self.position = row.Index
            yield BarInput(row.Index, row.close, row.bid_volume, row.ask_volume)

    def _current(self, column):
        if self.position < 0 or self.position >= len(self.df):
            raise IndexError("Replay feed is not positioned on a bar")
        return self.df[column].iloc[self.position]

    def get_current_bid_volume(self):
        return self._current('bid_volume')

    def get_current_ask_volume(self):
        return self._current('ask_volume')
