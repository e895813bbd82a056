# liquidity_zones/zones/registry.py

"""
Реестр живых зон: добавление, старение и инвалидация по принятию цены
"""

import logging

import pandas as pd

from liquidity_zones.effects import ClearSelectionSummary, RemoveVisual
from liquidity_zones.utils.tick_tools import ticks_to_price
from .models import Side

logger = logging.getLogger(__name__)

ZONE_COLUMNS = [
    "creation_index", "side", "label", "lower", "upper",
    "bid_volume", "ask_volume", "delta", "style", "highlight",
]


def is_expired(zone, current_bar_index, lifespan_bars):
    """Возраст строго больше lifespan: зона возраста ровно lifespan ещё живёт"""
    return current_bar_index - zone.creation_index > lifespan_bars


def is_accepted(zone, current_price, tick_size, tolerance_ticks):
    """
    Принятие цены за зоной против её стороны:
    Sell-зона: закрытие выше upper + tol, Buy-зона: ниже lower - tol.
    Неположительный допуск заменяется на 1 тик.
    """
    tolerance = 1 if tolerance_ticks <= 0 else tolerance_ticks
    offset = ticks_to_price(tolerance, tick_size)

    if zone.side == Side.SELL:
        return current_price > zone.upper + offset
    return current_price < zone.lower - offset


class ZoneRegistry:
    """
    Упорядоченная коллекция живых зон, ключ: creation_index (бар создания).
    Порядок вставки = порядок создания.
    """

    def __init__(self):
        self._zones = {}

    def __len__(self):
        return len(self._zones)

    def __contains__(self, creation_index):
        return creation_index in self._zones

    def __iter__(self):
        return iter(self.zones())

    def get(self, creation_index):
        return self._zones.get(creation_index)

    def zones(self):
        """Снимок зон в порядке создания (безопасен для чтения из другого потока)"""
        return list(self._zones.values())

    def add(self, zone):
        """Добавляет зону. Стиль зоны гарантирует вызывающий."""
        if zone.creation_index in self._zones:
            logger.warning(f"Зона для бара {zone.creation_index} уже существует, заменяем")
        self._zones[zone.creation_index] = zone

    def purge(self, current_bar_index, current_price, tick_size, lifespan_bars, tolerance_ticks, selector=None):
        """
        Удаляет устаревшие и "принятые" зоны

        Args:
            current_bar_index: индекс текущего бара
            current_price: цена закрытия текущего бара
            tick_size: шаг цены
            lifespan_bars: время жизни зоны в барах
            tolerance_ticks: допуск принятия в тиках
            selector: ZoneSelector, выбор которого сбрасывается при удалении зоны

        Returns:
            list: эффекты в порядке создания зон (RemoveVisual, ClearSelectionSummary)
        """
        if not self._zones:
            return []

        effects = []
        for zone in self.zones():
            expired = is_expired(zone, current_bar_index, lifespan_bars)
            accepted = is_accepted(zone, current_price, tick_size, tolerance_ticks)
            if not (expired or accepted):
                continue

            effects.extend(self._remove(zone, selector))
            logger.debug(
                f"🧹 Зона #{zone.creation_index} ({zone.side.value} {zone.label.value}) удалена: "
                f"{'expired' if expired else 'accepted'} на баре {current_bar_index}"
            )

        return effects

    def _remove(self, zone, selector):
        effects = [RemoveVisual(zone.visual_id)]
        if selector is None:
            self._zones.pop(zone.creation_index, None)
            return effects

        # удаление и сброс выбора под одним локом
        with selector.lock:
            self._zones.pop(zone.creation_index, None)
            if selector.discard(zone.creation_index):
                effects.append(ClearSelectionSummary())
        return effects

    def clear(self, selector=None):
        """
        Очищает реестр

        Returns:
            list: RemoveVisual для каждой зоны (+ ClearSelectionSummary, если был выбор)
        """
        effects = []
        for zone in self.zones():
            effects.extend(self._remove(zone, selector))
        return effects

    def to_dataframe(self):
        """Снимок живых зон в виде DataFrame (для анализа и вывода в CLI)"""
        rows = [
            {
                "creation_index": z.creation_index,
                "side": z.side.value,
                "label": z.label.value,
                "lower": z.lower,
                "upper": z.upper,
                "bid_volume": z.bid_volume,
                "ask_volume": z.ask_volume,
                "delta": z.delta,
                "style": z.style,
                "highlight": z.highlight,
            }
            for z in self.zones()
        ]
        return pd.DataFrame(rows, columns=ZONE_COLUMNS)
