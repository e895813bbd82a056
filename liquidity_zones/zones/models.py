# liquidity_zones/zones/models.py

"""
Модели зон агрессивной ликвидности
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ZONE_ID_PREFIX = "LZ_ZONE_"


class Side(str, Enum):
    BUY = "Buy"
    SELL = "Sell"


class ZoneLabel(str, Enum):
    ABSORPTION = "Absorption"
    MODERATE = "Moderate"
    STRONG = "Strong"
    EXTREME = "Extreme"


@dataclass(frozen=True)
class StyleTokens:
    """
    Визуальные токены зон (цвета заливки и обводки).

    Ярко-зелёный = сильная агрессия покупателей, красный = продавцов,
    оранжевый = умеренный дисбаланс, серый = поглощение,
    жёлтая обводка = экстремальное давление.
    """
    strong_buy: str = "LimeGreen"
    strong_sell: str = "Red"
    moderate: str = "Orange"
    absorption: str = "DimGray"
    extreme_highlight: str = "Yellow"


@dataclass(frozen=True)
class ZoneProfile:
    """Результат классификации дисбаланса одного бара"""
    style: Optional[str]
    highlight: Optional[str]
    side: Side
    label: ZoneLabel
    delta: float = 0.0
    ratio: float = 0.0

    @property
    def has_style(self) -> bool:
        return self.style is not None


@dataclass(frozen=True)
class Zone:
    """
    Ценовая зона, созданная по дисбалансу объёмов одного бара.

    Объёмы и дельта фиксируются в момент создания и больше не меняются.
    """
    creation_index: int
    lower: float
    upper: float
    bid_volume: float
    ask_volume: float
    delta: float
    side: Side
    label: ZoneLabel
    style: str
    highlight: Optional[str] = None
    price_center: Optional[float] = None

    @property
    def visual_id(self) -> str:
        return f"{ZONE_ID_PREFIX}{self.creation_index}"

    def contains(self, price: float) -> bool:
        return self.lower <= price <= self.upper
