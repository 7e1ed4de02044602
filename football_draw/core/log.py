import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # Настраиваем корневой логгер для CLI-запуска.
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
