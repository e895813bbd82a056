"""
Liquidity Zones v1.0
Зоны агрессивной ликвидности по дисбалансу bid/ask объёмов
"""

__version__ = "1.0.0"
