# liquidity_zones/feed/volume_source.py

"""
Чтение bid/ask объёмов из внешнего источника.
Ошибка чтения не пробрасывается: объём считается нулевым и бар
просто не проходит фильтр минимального объёма.
"""

import logging
import math

logger = logging.getLogger(__name__)


def read_volume(reader, name="volume"):
    """
    Безопасно вызывает reader()

    Args:
        reader: callable без аргументов, возвращающий объём
        name: имя для лога

    Returns:
        float: объём >= 0; 0.0 при ошибке, None, NaN или отрицательном значении
    """
    try:
        value = reader()
    except Exception as e:
        logger.debug(f"Не удалось прочитать {name}: {e}")
        return 0.0

    if value is None:
        return 0.0

    try:
        value = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Некорректное значение {name}: {value!r}")
        return 0.0

    if math.isnan(value) or value < 0:
        return 0.0
    return value


def read_bid_ask(source):
    """
    Returns:
        tuple: (bid_volume, ask_volume) из источника с методами
        get_current_bid_volume() / get_current_ask_volume()
    """
    if source is None:
        return 0.0, 0.0

    bid = read_volume(source.get_current_bid_volume, "bid volume")
    ask = read_volume(source.get_current_ask_volume, "ask volume")
    return bid, ask
