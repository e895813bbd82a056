"""
Конфигурация проекта Liquidity Zones
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Определяем путь к .env файлу (в корне проекта)
env_path = Path(__file__).parent / '.env'

# Загрузка переменных окружения из .env файла
if env_path.exists():
    load_dotenv(dotenv_path=env_path, override=True)
else:
    # Пробуем загрузить из текущей директории
    load_dotenv(override=True)


def _env_bool(name, default):
    return os.getenv(name, default).lower() == "true"


class Config:
    """Класс для хранения всех настроек проекта"""

    # ============================================
    # ОТОБРАЖЕНИЕ
    # ============================================
    ENABLE_COLOR_LAYERS: bool = _env_bool("ENABLE_COLOR_LAYERS", "True")

    # ============================================
    # ЦВЕТА (токены стилей для рендера)
    # ============================================
    STRONG_BUY_STYLE: str = os.getenv("STRONG_BUY_STYLE", "LimeGreen")
    STRONG_SELL_STYLE: str = os.getenv("STRONG_SELL_STYLE", "Red")
    MODERATE_STYLE: str = os.getenv("MODERATE_STYLE", "Orange")
    ABSORPTION_STYLE: str = os.getenv("ABSORPTION_STYLE", "DimGray")
    EXTREME_HIGHLIGHT_STYLE: str = os.getenv("EXTREME_HIGHLIGHT_STYLE", "Yellow")

    # ============================================
    # ПРЕСЕТЫ КОНТРАКТА
    # ============================================
    USE_MINI_PRESET: bool = _env_bool("USE_MINI_PRESET", "True")
    USE_MICRO_PRESET: bool = _env_bool("USE_MICRO_PRESET", "False")

    # ============================================
    # ПОРОГИ ДИСБАЛАНСА (|ask - bid| / (ask + bid))
    # ============================================
    MODERATE_THRESHOLD: float = float(os.getenv("MODERATE_THRESHOLD", "0.15"))
    STRONG_THRESHOLD: float = float(os.getenv("STRONG_THRESHOLD", "0.30"))
    EXTREME_THRESHOLD: float = float(os.getenv("EXTREME_THRESHOLD", "0.45"))

    # ============================================
    # ЗОНЫ
    # ============================================
    ZONE_LIFESPAN_BARS: int = int(os.getenv("ZONE_LIFESPAN_BARS", "300"))
    ACCEPTANCE_TOLERANCE_TICKS: float = float(os.getenv("ACCEPTANCE_TOLERANCE_TICKS", "2"))
    ZONE_THICKNESS_TICKS: int = int(os.getenv("ZONE_THICKNESS_TICKS", "4"))

    # ============================================
    # ФИЛЬТРЫ
    # ============================================
    MINIMUM_VOLUME: float = float(os.getenv("MINIMUM_VOLUME", "500"))

    # ============================================
    # ИНСТРУМЕНТ И ВОСПРОИЗВЕДЕНИЕ
    # ============================================
    TICK_SIZE: float = float(os.getenv("TICK_SIZE", "0.25"))
    REPLAY_CSV: str = os.getenv("REPLAY_CSV", "data/replay.csv")

    # ============================================
    # ЛОГИ
    # ============================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOGS_DIR: str = os.getenv("LOGS_DIR", "logs")

    def __init__(self):
        """Инициализация и создание необходимых директорий"""
        os.makedirs(self.LOGS_DIR, exist_ok=True)
