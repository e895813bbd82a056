"""
Imbalance - классификация дисбаланса bid/ask объёмов
"""

from .classifier import classify_imbalance, classify_with_settings, compute_imbalance_ratio

__all__ = [
    'classify_imbalance',
    'classify_with_settings',
    'compute_imbalance_ratio'
]
