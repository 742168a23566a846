import logging

from decouple import config

# ==============================
# Настройки (переменные окружения или .env)
# ==============================
LOG_LEVEL = config("SOLID_NOTES_LOG_LEVEL", default="INFO")
LOG_FILE = config("SOLID_NOTES_LOG_FILE", default="")
PRECISION = config("SOLID_NOTES_PRECISION", default=3, cast=int)
DEFAULT_FORMAT = config("SOLID_NOTES_DEFAULT_FORMAT", default="json")
DB_PATH = config("SOLID_NOTES_DB_PATH", default=":memory:")


# ==============================
# Настройка логирования
# ==============================
def setup_logging(level=None, log_file=None):
    """Настраивает логирование: консоль и, если задан, файл."""
    handlers = [logging.StreamHandler()]
    log_file = LOG_FILE if log_file is None else log_file
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),  # DEBUG покажет каждое слагаемое суммы
        format='%(asctime)s %(levelname)s %(message)s',
        handlers=handlers,
    )
