# liquidity_zones/settings.py

"""
Настройки зон: неизменяемый пакет параметров на один цикл
"""

import logging
from dataclasses import dataclass, field, replace

from liquidity_zones.zones.models import StyleTokens

logger = logging.getLogger(__name__)


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass(frozen=True)
class ZoneSettings:
    enable_color_layers: bool = True
    styles: StyleTokens = field(default_factory=StyleTokens)
    moderate_threshold: float = 0.15
    strong_threshold: float = 0.30
    extreme_threshold: float = 0.45
    zone_lifespan_bars: int = 300
    acceptance_tolerance_ticks: float = 2.0
    zone_thickness_ticks: int = 4
    minimum_volume: float = 500.0
    use_mini_preset: bool = True
    use_micro_preset: bool = False

    @classmethod
    def from_config(cls, config=None):
        """
        Собирает настройки из Config (или любого объекта с такими же атрибутами).
        Отсутствующие атрибуты берутся по умолчанию.
        """
        defaults = cls()
        if config is None:
            return defaults

        base_styles = defaults.styles
        styles = StyleTokens(
            strong_buy=getattr(config, 'STRONG_BUY_STYLE', base_styles.strong_buy),
            strong_sell=getattr(config, 'STRONG_SELL_STYLE', base_styles.strong_sell),
            moderate=getattr(config, 'MODERATE_STYLE', base_styles.moderate),
            absorption=getattr(config, 'ABSORPTION_STYLE', base_styles.absorption),
            extreme_highlight=getattr(config, 'EXTREME_HIGHLIGHT_STYLE', base_styles.extreme_highlight),
        )

        return cls(
            enable_color_layers=_as_bool(getattr(config, 'ENABLE_COLOR_LAYERS', defaults.enable_color_layers)),
            styles=styles,
            moderate_threshold=float(getattr(config, 'MODERATE_THRESHOLD', defaults.moderate_threshold)),
            strong_threshold=float(getattr(config, 'STRONG_THRESHOLD', defaults.strong_threshold)),
            extreme_threshold=float(getattr(config, 'EXTREME_THRESHOLD', defaults.extreme_threshold)),
            zone_lifespan_bars=int(getattr(config, 'ZONE_LIFESPAN_BARS', defaults.zone_lifespan_bars)),
            acceptance_tolerance_ticks=float(getattr(config, 'ACCEPTANCE_TOLERANCE_TICKS', defaults.acceptance_tolerance_ticks)),
            zone_thickness_ticks=int(getattr(config, 'ZONE_THICKNESS_TICKS', defaults.zone_thickness_ticks)),
            minimum_volume=float(getattr(config, 'MINIMUM_VOLUME', defaults.minimum_volume)),
            use_mini_preset=_as_bool(getattr(config, 'USE_MINI_PRESET', defaults.use_mini_preset)),
            use_micro_preset=_as_bool(getattr(config, 'USE_MICRO_PRESET', defaults.use_micro_preset)),
        ).normalized()

    def normalized(self):
        """
        Приводит значения к допустимым диапазонам вместо ошибки:
        lifespan и thickness >= 1, minimum_volume и tolerance >= 0.
        Порядок порогов не проверяется.
        """
        fixes = {}
        if self.zone_lifespan_bars < 1:
            fixes["zone_lifespan_bars"] = 1
        if self.zone_thickness_ticks < 1:
            fixes["zone_thickness_ticks"] = 1
        if self.minimum_volume < 0:
            fixes["minimum_volume"] = 0.0
        if self.acceptance_tolerance_ticks < 0:
            fixes["acceptance_tolerance_ticks"] = 0.0

        if not fixes:
            return self

        logger.warning(f"⚠️ Настройки зон скорректированы: {fixes}")
        return replace(self, **fixes)
