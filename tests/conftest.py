import os
import sys
from pathlib import Path

# Добавляем корень проекта в sys.path для корректного импорта football_draw и scripts.
sys.path.append(str(Path(__file__).resolve().parents[1]))
# Фиксируем настройки, чтобы локальный .env не влиял на тесты.
os.environ.setdefault("DRAW_LOG_LEVEL", "WARNING")
os.environ.setdefault("DRAW_OUTPUT_FORMAT", "text")
