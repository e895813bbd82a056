# liquidity_zones/utils/formatting.py

"""
Текстовые подписи зон и сводка выбранной зоны
"""

import math
from decimal import Decimal, ROUND_HALF_UP


def format_volume(value):
    """
    Формат N0: разделитель тысяч, без дробной части.
    Половина округляется от нуля (2.5 -> '3', 1234.6 -> '1,235')
    """
    if not math.isfinite(value):
        return f"{value:,.0f}"
    rounded = Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{rounded:,.0f}"


def format_zone_label(zone):
    """
    Подпись у прямоугольника зоны

    Returns:
        str: "Buy\\nBid: 300\\nAsk: 700\\nΔ: 400"
    """
    return (
        f"{zone.side.value}\n"
        f"Bid: {format_volume(zone.bid_volume)}\n"
        f"Ask: {format_volume(zone.ask_volume)}\n"
        f"Δ: {format_volume(zone.delta)}"
    )


def format_selection_summary(zone):
    """Сводка для выбранной зоны (показывается в углу графика)"""
    return (
        f"{zone.side.value} Liquidity Zone\n"
        f"Bid: {format_volume(zone.bid_volume)}\n"
        f"Ask: {format_volume(zone.ask_volume)}\n"
        f"Delta: {format_volume(zone.delta)}"
    )
