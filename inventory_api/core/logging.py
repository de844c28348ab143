"""Настройка логирования."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Настраивает корневой логгер, если он еще не настроен, и задает уровень.

    Args:
        level: Имя уровня логирования (например, "INFO" или "DEBUG").
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
