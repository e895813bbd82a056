# liquidity_zones/zones/factory.py

from liquidity_zones.utils.tick_tools import round_to_tick
from .models import Zone


def compute_zone_band(price, tick_size, thickness_ticks):
    """
    Границы зоны вокруг цены закрытия

    Args:
        price: центр зоны
        tick_size: шаг цены
        thickness_ticks: толщина зоны в тиках

    Returns:
        tuple: (lower, upper), upper >= lower
    """
    half_ticks = thickness_ticks / 2.0
    a = round_to_tick(price + half_ticks * tick_size, tick_size)
    b = round_to_tick(price - half_ticks * tick_size, tick_size)
    # max/min на случай инверсии после округления
    return min(a, b), max(a, b)


def create_zone(profile, price, tick_size, thickness_ticks, bid_volume, ask_volume, delta, creation_index):
    """
    Создаёт зону из профиля классификатора.
    Вызывается только если profile.style не None.
    """
    lower, upper = compute_zone_band(price, tick_size, thickness_ticks)

    return Zone(
        creation_index=creation_index,
        lower=lower,
        upper=upper,
        bid_volume=bid_volume,
        ask_volume=ask_volume,
        delta=delta,
        side=profile.side,
        label=profile.label,
        style=profile.style,
        highlight=profile.highlight,
        price_center=price,
    )
