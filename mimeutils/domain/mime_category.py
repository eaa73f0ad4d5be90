# mimeutils/domain/mime_category.py
from enum import Enum
from typing import Union

from mimeutils.exceptions import FormatError


class MimeCategory(str, Enum):
    """Clasificación general de un tipo MIME. El valor es el texto usado en el documento."""
    UNKNOWN = "Unknown"
    TEXT = "Text"
    IMAGE = "Image"
    AUDIO = "Audio"
    VIDEO = "Video"
    DOCUMENT = "Document"
    ARCHIVE = "Archive"
    CODE = "Code"
    FONT = "Font"
    BINARY = "Binary"

    @classmethod
    def parse(cls, value: Union["MimeCategory", str, None]) -> "MimeCategory":
        """
        Convierte un valor del documento a MimeCategory.

        Acepta el miembro, su valor exacto o su nombre sin distinguir mayúsculas.
        None o "" equivalen a UNKNOWN.

        Raises:
            FormatError: si el texto no corresponde a ninguna categoría.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        if not isinstance(value, str):
            raise FormatError("Category", value)

        text = value.strip()
        if not text:
            return cls.UNKNOWN

        if text in cls._value2member_map_:
            return cls(text)

        lowered = text.lower()
        for member in cls:
            if lowered in (member.name.lower(), member.value.lower()):
                return member

        raise FormatError("Category", value)
