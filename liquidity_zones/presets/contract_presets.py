# liquidity_zones/presets/contract_presets.py

"""
Пресеты под размер контракта (mini / micro)
"""

from dataclasses import replace

MINI_PRESET = {
    "moderate_threshold": 0.18,
    "strong_threshold": 0.35,
    "extreme_threshold": 0.55,
    "min_volume_floor": 800.0,
    "min_volume_cap": None,
}

MICRO_PRESET = {
    "moderate_threshold": 0.12,
    "strong_threshold": 0.25,
    "extreme_threshold": 0.40,
    "min_volume_floor": 250.0,
    "min_volume_cap": 400.0,
}


def resolve_preset_name(use_mini, use_micro):
    """
    Returns:
        "mini" / "micro", либо None если флаги не заданы или заданы оба
    """
    if use_mini and not use_micro:
        return "mini"
    if use_micro and not use_mini:
        return "micro"
    return None


def apply_contract_preset(use_mini, use_micro, settings):
    """
    Перезаписывает пороги и минимальный объём по пресету

    Args:
        use_mini: пресет mini-контракта
        use_micro: пресет micro-контракта
        settings: ZoneSettings

    Returns:
        ZoneSettings: новые настройки; если флаги не заданы или заданы оба,
        возвращается тот же объект
    """
    name = resolve_preset_name(use_mini, use_micro)
    if name is None:
        return settings

    preset = MINI_PRESET if name == "mini" else MICRO_PRESET

    minimum_volume = max(settings.minimum_volume, preset["min_volume_floor"])
    if preset["min_volume_cap"] is not None:
        minimum_volume = min(minimum_volume, preset["min_volume_cap"])

    return replace(
        settings,
        moderate_threshold=preset["moderate_threshold"],
        strong_threshold=preset["strong_threshold"],
        extreme_threshold=preset["extreme_threshold"],
        minimum_volume=minimum_volume,
    )


def apply_settings_preset(settings):
    """Применяет пресет по флагам, записанным в самих настройках"""
    return apply_contract_preset(settings.use_mini_preset, settings.use_micro_preset, settings)
