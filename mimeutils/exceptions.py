# mimeutils/exceptions.py
from typing import Any


class FormatError(ValueError):
    """
    Valor con formato inválido para un campo de MimeType.

    `field` es el nombre del campo en el documento (ej: "FileExt") y
    `value` el elemento rechazado.
    """

    def __init__(self, field: str, value: Any, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"{field} is not correct format: {value}")
