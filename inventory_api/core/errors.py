"""Типизированные ошибки приложения и их HTTP-статусы."""


class InventoryError(Exception):
    """Базовая ошибка. Сообщение уходит клиенту в поле `error`."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(InventoryError):
    """Обязательные поля отсутствуют или имеют неверный формат."""

    status_code = 400


class NotFoundError(InventoryError):
    """Ни одна строка не соответствует идентификатору."""

    status_code = 404

    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message)


class StorageError(InventoryError):
    """Любой сбой на уровне базы данных."""

    status_code = 500
