"""
Скрипт для создания .env файла из шаблона env.example
Существующий .env не перезаписывается.
"""
from pathlib import Path
import shutil

def create_env_from_example():
    """Создает .env файл из env.example"""
    example_path = Path('env.example')
    env_path = Path('.env')

    if not example_path.exists():
        print(f"❌ Файл {example_path} не найден!")
        return

    if env_path.exists():
        print(f"⚠️ Файл {env_path} уже существует, пропускаем")
        return

    shutil.copy(example_path, env_path)

    print(f"✅ Файл .env создан из {example_path}")
    print(f"📝 Проверьте параметры в .env:")
    print(f"   - TICK_SIZE под ваш инструмент")
    print(f"   - USE_MINI_PRESET / USE_MICRO_PRESET")
    print(f"   - REPLAY_CSV с колонками close, bid_volume, ask_volume")

if __name__ == "__main__":
    create_env_from_example()
