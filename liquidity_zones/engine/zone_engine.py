# liquidity_zones/engine/zone_engine.py

import logging
import math

from liquidity_zones.effects import (
    AddVisual,
    DEFAULT_FILL_OPACITY,
    SELECTED_FILL_OPACITY,
)
from liquidity_zones.feed.volume_source import read_volume
from liquidity_zones.imbalance.classifier import classify_with_settings
from liquidity_zones.presets.contract_presets import apply_settings_preset, resolve_preset_name
from liquidity_zones.settings import ZoneSettings
from liquidity_zones.utils.formatting import format_zone_label
from liquidity_zones.zones.factory import create_zone
from liquidity_zones.zones.models import ZoneLabel
from liquidity_zones.zones.registry import ZoneRegistry
from liquidity_zones.zones.selector import ZoneSelector

logger = logging.getLogger(__name__)

# бары с индексом < WARMUP_BARS только перерисовываются
WARMUP_BARS = 1


class ZoneEngine:
    """
    Зоны агрессивной ликвидности: классификация дисбаланса bid/ask,
    жизненный цикл зон и выбор зоны кликом.

    Хост вызывает фазы явно:
        initialize() -> reconfigure() при смене настроек -> reset()
    и циклы:
        on_bar_close(): один раз на закрытый бар, строго последовательно
        on_pointer(): по клику, может прийти из другого потока

    Каждый вызов возвращает упорядоченный список эффектов для рендера.
    """

    def __init__(self, settings=None, volume_source=None):
        self.volume_source = volume_source
        self.registry = ZoneRegistry()
        self.selector = ZoneSelector(self.registry)
        self.base_settings = None
        self.effective_settings = None
        self.last_bar_index = None
        self.initialize(settings)

    # ------------------------------------------------------------------
    # Фазы
    # ------------------------------------------------------------------

    def initialize(self, settings=None):
        """Первичная настройка: нормализация, пресет, чистый реестр"""
        return self._configure(settings or ZoneSettings(), phase="initialize")

    def reconfigure(self, settings):
        """Смена настроек: реестр и выбор сбрасываются, пресет применяется заново"""
        return self._configure(settings, phase="reconfigure")

    def reset(self):
        """
        Очищает реестр и выбор

        Returns:
            list: RemoveVisual для каждой зоны (+ ClearSelectionSummary)
        """
        effects = self.registry.clear(self.selector)
        self.last_bar_index = None
        return effects

    def _configure(self, settings, phase):
        self.base_settings = settings.normalized()
        self.effective_settings = apply_settings_preset(self.base_settings)

        preset = resolve_preset_name(self.base_settings.use_mini_preset, self.base_settings.use_micro_preset)
        s = self.effective_settings
        logger.info(
            f"⚙️ {phase}: preset={preset or 'none'}, thresholds="
            f"{s.moderate_threshold}/{s.strong_threshold}/{s.extreme_threshold}, "
            f"min_volume={s.minimum_volume}, lifespan={s.zone_lifespan_bars}"
        )
        return self.reset()

    # ------------------------------------------------------------------
    # Циклы
    # ------------------------------------------------------------------

    def on_bar_close(self, bar_index, close_price, tick_size, bid_volume=None, ask_volume=None):
        """
        Обработка закрытого бара

        Args:
            bar_index: индекс бара
            close_price: цена закрытия (None/NaN: зона не создаётся, зоны удаляются только по возрасту)
            tick_size: шаг цены (> 0)
            bid_volume / ask_volume: объёмы; непереданная сторона читается из volume_source

        Returns:
            list: эффекты (RemoveVisual / ClearSelectionSummary / AddVisual)
        """
        settings = self.effective_settings
        self.last_bar_index = bar_index

        if bar_index < WARMUP_BARS:
            return self.render()

        if bid_volume is None:
            bid_volume = self._read_source_volume("get_current_bid_volume", "bid volume")
        if ask_volume is None:
            ask_volume = self._read_source_volume("get_current_ask_volume", "ask volume")

        effects = []
        total_volume = bid_volume + ask_volume

        # без цены закрытия зону не построить, а принятие цены не проверить
        price_ok = close_price is not None and math.isfinite(close_price)
        if not price_ok:
            logger.debug(f"Бар #{bar_index}: некорректная цена закрытия {close_price!r}, зона не создаётся")
            close_price = math.nan

        if price_ok and total_volume >= settings.minimum_volume and total_volume > 0:
            profile = classify_with_settings(bid_volume, ask_volume, settings)
            if profile.has_style:
                zone = create_zone(
                    profile,
                    close_price,
                    tick_size,
                    settings.zone_thickness_ticks,
                    bid_volume,
                    ask_volume,
                    profile.delta,
                    bar_index,
                )
                self.registry.add(zone)
                self._log_new_zone(zone, profile.ratio)

        effects.extend(self.registry.purge(
            bar_index,
            close_price,
            tick_size,
            settings.zone_lifespan_bars,
            settings.acceptance_tolerance_ticks,
            selector=self.selector,
        ))
        effects.extend(self.render())
        return effects

    def on_pointer(self, pointer_price, bar_index=None):
        """
        Клик по графику: выбор зоны по цене

        Returns:
            list: SetSelectionSummary/ClearSelectionSummary + перерисовка зон
        """
        if len(self.registry) == 0:
            return []

        effects = self.selector.hit_test(pointer_price, bar_index)
        effects.extend(self.render())
        return effects

    # ------------------------------------------------------------------
    # Рендер
    # ------------------------------------------------------------------

    def render(self):
        """AddVisual для каждой живой зоны в порядке создания"""
        if len(self.registry) == 0:
            return []

        current = self.last_bar_index if self.last_bar_index is not None else 0
        lifespan = self.effective_settings.zone_lifespan_bars
        selected_index = self.selector.selected_index

        visuals = []
        for zone in self.registry.zones():
            is_selected = zone.creation_index == selected_index
            if is_selected:
                outline = zone.style
            else:
                outline = zone.highlight or zone.style

            visuals.append(AddVisual(
                id=zone.visual_id,
                upper_price=zone.upper,
                lower_price=zone.lower,
                bars_ago=max(0, min(current - zone.creation_index, lifespan)),
                style=zone.style,
                outline=outline,
                label_text=format_zone_label(zone),
                fill_opacity=SELECTED_FILL_OPACITY if is_selected else DEFAULT_FILL_OPACITY,
                selected=is_selected,
            ))
        return visuals

    @property
    def zones(self):
        return self.registry.zones()

    def selected_zone(self):
        return self.selector.selected_zone()

    def _read_source_volume(self, method_name, name):
        if self.volume_source is None:
            return 0.0
        return read_volume(getattr(self.volume_source, method_name), name)

    def _log_new_zone(self, zone, ratio):
        message = (
            f"Зона #{zone.creation_index}: {zone.side.value} {zone.label.value} "
            f"[{zone.lower} - {zone.upper}] ratio={ratio:.3f} delta={zone.delta:.0f}"
        )
        if zone.label == ZoneLabel.EXTREME:
            logger.info(f"🔥 {message}")
        else:
            logger.debug(message)
