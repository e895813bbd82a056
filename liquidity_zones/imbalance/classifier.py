# liquidity_zones/imbalance/classifier.py

from liquidity_zones.zones.models import Side, StyleTokens, ZoneLabel, ZoneProfile


def compute_imbalance_ratio(bid_volume, ask_volume):
    """
    Дисбаланс = (ask - bid) / (ask + bid).
    Положительный: агрессия покупателей, отрицательный: продавцов.

    Returns:
        tuple: (delta, ratio); при нулевом объёме ratio = 0
    """
    total = bid_volume + ask_volume
    delta = ask_volume - bid_volume
    if total <= 0:
        return delta, 0.0
    return delta, delta / total


def classify_imbalance(bid_volume, ask_volume, moderate_threshold, strong_threshold,
                       extreme_threshold, enable_color_layers=True, styles=None):
    """
    Классифицирует дисбаланс бара в профиль зоны.

    Уровни проверяются сверху вниз: extreme -> strong -> moderate,
    достижение порога считается включительно (>=).

    Args:
        bid_volume: объём по биду (>= 0)
        ask_volume: объём по аску (>= 0)
        moderate_threshold / strong_threshold / extreme_threshold: пороги |ratio|
        enable_color_layers: цветные слои; если выключены, все зоны кроме
            поглощения рисуются токеном absorption
        styles: StyleTokens

    Returns:
        ZoneProfile: style=None означает "зону не создавать"
    """
    if styles is None:
        styles = StyleTokens()

    total = bid_volume + ask_volume
    if total <= 0:
        return ZoneProfile(style=None, highlight=None, side=Side.BUY, label=ZoneLabel.ABSORPTION)

    delta, ratio = compute_imbalance_ratio(bid_volume, ask_volume)

    if abs(ratio) < moderate_threshold:
        # Поглощение: поток сбалансирован, только серый токен
        return ZoneProfile(
            style=styles.absorption if enable_color_layers else None,
            highlight=None,
            side=Side.BUY if ratio >= 0 else Side.SELL,
            label=ZoneLabel.ABSORPTION,
            delta=delta,
            ratio=ratio,
        )

    is_buy = ratio > 0
    magnitude = abs(ratio)
    highlight = None

    if magnitude >= extreme_threshold:
        base_style = styles.strong_buy if is_buy else styles.strong_sell
        highlight = styles.extreme_highlight
        label = ZoneLabel.EXTREME
    elif magnitude >= strong_threshold:
        base_style = styles.strong_buy if is_buy else styles.strong_sell
        label = ZoneLabel.STRONG
    else:
        base_style = styles.moderate
        label = ZoneLabel.MODERATE

    return ZoneProfile(
        style=base_style if enable_color_layers else styles.absorption,
        highlight=highlight,
        side=Side.BUY if is_buy else Side.SELL,
        label=label,
        delta=delta,
        ratio=ratio,
    )


def classify_with_settings(bid_volume, ask_volume, settings):
    """Обёртка над classify_imbalance для ZoneSettings"""
    return classify_imbalance(
        bid_volume,
        ask_volume,
        settings.moderate_threshold,
        settings.strong_threshold,
        settings.extreme_threshold,
        enable_color_layers=settings.enable_color_layers,
        styles=settings.styles,
    )
