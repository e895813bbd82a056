"""
Liquidity Zones - Главная точка входа
Воспроизводит закрытые бары из CSV через ZoneEngine и логирует эффекты рендера
"""

import logging
import sys
from collections import Counter
from config import Config
from liquidity_zones.effects import AddVisual, RemoveVisual
from liquidity_zones.engine import ZoneEngine
from liquidity_zones.feed import ReplayFeed
from liquidity_zones.settings import ZoneSettings

config = Config()

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(f'{config.LOGS_DIR}/liquidity_zones.log'),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger(__name__)


def replay(feed, engine, tick_size):
    """
    Прогоняет все бары фида через движок

    Returns:
        Counter: количество эффектов по типу
    """
    stats = Counter()
    for bar in feed.bars():
        effects = engine.on_bar_close(bar.index, bar.close, tick_size)
        for effect in effects:
            stats[type(effect).__name__] += 1
            if isinstance(effect, RemoveVisual):
                logger.debug(f"➖ {effect.id}")
        stats["bars"] += 1
    return stats


def main():
    """Главная функция запуска"""
    logger.info("🚀 Запуск Liquidity Zones replay...")

    try:
        feed = ReplayFeed.from_csv(config.REPLAY_CSV)
    except ValueError as e:
        logger.error(f"❌ Ошибка загрузки данных: {e}")
        return 1

    settings = ZoneSettings.from_config(config)
    engine = ZoneEngine(settings, volume_source=feed)

    stats = replay(feed, engine, config.TICK_SIZE)

    live = engine.registry.to_dataframe()
    logger.info(
        f"✅ Обработано баров: {stats['bars']}, "
        f"отрисовок: {stats[AddVisual.__name__]}, удалений: {stats[RemoveVisual.__name__]}, "
        f"живых зон: {len(live)}"
    )
    if not live.empty:
        logger.info(f"📊 Живые зоны:\n{live.to_string(index=False)}")
    return 0


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("⏹️ Остановлено пользователем")


if __name__ == "__main__":
    run()
