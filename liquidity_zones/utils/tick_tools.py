# liquidity_zones/utils/tick_tools.py

from decimal import Decimal

import numpy as np


def tick_decimals(tick_size):
    """Количество знаков после запятой у шага цены (0.25 -> 2, 1 -> 0)"""
    exponent = Decimal(str(tick_size)).normalize().as_tuple().exponent
    return max(0, -exponent)


def round_to_tick(price, tick_size):
    """
    Округление цены к сетке тиков

    Половина тика округляется вверх (floor(price / tick + 0.5)),
    затем убирается шум float до точности шага.

    Args:
        price: цена
        tick_size: минимальный шаг цены (> 0)

    Returns:
        float: цена, кратная tick_size
    """
    if tick_size is None or tick_size <= 0:
        return float(price)

    ticks = np.floor(price / tick_size + 0.5)
    return round(float(ticks * tick_size), tick_decimals(tick_size))


def ticks_to_price(ticks, tick_size):
    """Перевод количества тиков в ценовое расстояние"""
    return ticks * tick_size
