# liquidity_zones/zones/selector.py

"""
Выбор зоны кликом по графику
"""

import logging
import threading

from liquidity_zones.effects import ClearSelectionSummary, SetSelectionSummary
from liquidity_zones.utils.formatting import format_selection_summary

logger = logging.getLogger(__name__)


class ZoneSelector:
    """
    Хранит не больше одной выбранной зоны, только её creation_index.

    Ссылка слабая: при каждом чтении проверяется по реестру, поэтому
    удалённая зона автоматически превращается в "нет выбора".
    Все записи в слот выбора и удаления из реестра идут под self.lock.
    """

    def __init__(self, registry):
        self.registry = registry
        self.lock = threading.RLock()
        self._selected_index = None

    @property
    def selected_index(self):
        with self.lock:
            if self._selected_index is not None and self._selected_index not in self.registry:
                self._selected_index = None
            return self._selected_index

    def selected_zone(self):
        index = self.selected_index
        if index is None:
            return None
        return self.registry.get(index)

    def find_zone_at(self, pointer_price):
        """Первая (по порядку создания) зона, содержащая цену"""
        for zone in self.registry.zones():
            if zone.contains(pointer_price):
                return zone
        return None

    def hit_test(self, pointer_price, bar_index=None):
        """
        Обработка клика: выбирает зону под курсором.

        Проверяется только цена; bar_index принимается, но не используется,
        зона может быть выбрана вне своего горизонтального диапазона.

        Returns:
            list: эффекты (SetSelectionSummary / ClearSelectionSummary)
        """
        if len(self.registry) == 0:
            return []

        zone = self.find_zone_at(pointer_price)
        if zone is not None and self.select(zone.creation_index):
            logger.debug(f"🎯 Выбрана зона #{zone.creation_index} ({zone.side.value} {zone.label.value})")
            return [SetSelectionSummary(format_selection_summary(zone))]

        self.clear()
        return [ClearSelectionSummary()]

    def select(self, creation_index):
        """
        Выбирает зону, если она всё ещё в реестре.

        Returns:
            bool: True если выбор установлен
        """
        with self.lock:
            if creation_index not in self.registry:
                return False
            self._selected_index = creation_index
            return True

    def discard(self, creation_index):
        """
        Сбрасывает выбор, если он указывает на creation_index.
        Вызывается реестром при удалении зоны (уже под self.lock).

        Returns:
            bool: True если выбор был сброшен
        """
        with self.lock:
            if self._selected_index == creation_index:
                self._selected_index = None
                return True
            return False

    def clear(self):
        """Сбрасывает выбор. Returns: bool, был ли выбор"""
        with self.lock:
            had_selection = self._selected_index is not None
            self._selected_index = None
            return had_selection
