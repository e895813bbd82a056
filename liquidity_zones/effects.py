# liquidity_zones/effects.py

"""
Команды для внешнего рендера.
Ядро ничего не рисует само: каждый визуальный результат это команда в упорядоченном списке.
"""

from dataclasses import dataclass
from typing import Optional

SELECTED_FILL_OPACITY = 0.6
DEFAULT_FILL_OPACITY = 0.35


@dataclass(frozen=True)
class AddVisual:
    """Нарисовать/перерисовать прямоугольник зоны с подписью (по id)"""
    id: str
    upper_price: float
    lower_price: float
    bars_ago: int
    style: str
    outline: Optional[str]
    label_text: str
    fill_opacity: float = DEFAULT_FILL_OPACITY
    selected: bool = False


@dataclass(frozen=True)
class RemoveVisual:
    id: str


@dataclass(frozen=True)
class SetSelectionSummary:
    text: str


@dataclass(frozen=True)
class ClearSelectionSummary:
    pass
