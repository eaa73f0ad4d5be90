# mimeutils/domain/mime_type.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Optional, Tuple

from mimeutils.domain.mime_category import MimeCategory
from mimeutils.exceptions import FormatError


def _validate_sequence(
    values: Optional[Iterable[Any]], delimiter: str, field: str
) -> Tuple[str, ...]:
    """
    Valida una secuencia de extensiones o content types antes de guardarla.

    Se valida completa antes de devolverla, así que una asignación fallida
    nunca deja un valor a medias.
    """
    if values is None:
        return ()
    if isinstance(values, str):
        raise FormatError(field, values, f"{field} expects a sequence of strings, got a single string: {values}")

    try:
        items = tuple(values)
    except TypeError:
        raise FormatError(field, values, f"{field} expects a sequence of strings, got: {values!r}") from None
    for item in items:
        if not isinstance(item, str) or delimiter not in item:
            raise FormatError(field, item)
    return items


@dataclass
class MimeType:
    """
    Multipurpose Internet Mail Extensions (MIME) type.

    Asocia extensiones de archivo y content types con una categoría.
    Cada asignación se valida al momento:
    - cada extensión debe contener '.'
    - cada content type debe contener '/'
    Si falla, se lanza FormatError y el valor anterior queda intacto.

    El primer elemento de cada secuencia es el valor dominante.
    `primary` marca la entrada preferida cuando una búsqueda en el registro
    es ambigua; el orden entre entradas no lo consulta.
    """

    EMPTY: ClassVar[MimeType]

    name: str = ""
    description: str = ""
    file_extensions: Tuple[str, ...] = ()
    content_types: Tuple[str, ...] = ()
    category: MimeCategory = MimeCategory.UNKNOWN
    primary: bool = False

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "file_extensions":
            value = _validate_sequence(value, ".", "FileExt")
        elif key == "content_types":
            value = _validate_sequence(value, "/", "ContentType")
        elif key == "category":
            value = MimeCategory.parse(value)
        elif key in ("name", "description"):
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise FormatError(key.capitalize(), value)
        elif key == "primary":
            if value is None:
                value = False
            elif not isinstance(value, bool):
                raise FormatError("primary", value)
        super().__setattr__(key, value)

    # ------------------------
    # Valores derivados
    # ------------------------
    @property
    def dominant_content_type(self) -> str:
        """Content type dominante (el primero), o "" si no hay ninguno."""
        return self.content_types[0] if self.content_types else ""

    @property
    def dominant_file_extension(self) -> str:
        """Extensión dominante (la primera), o "" si no hay ninguna."""
        return self.file_extensions[0] if self.file_extensions else ""

    @property
    def is_empty(self) -> bool:
        return self == MimeType()

    # ------------------------
    # Orden
    # ------------------------
    def sort_key(self) -> Tuple[int, str]:
        """
        Clave de orden total.

        Sin extensiones se ordena por nombre y va antes que cualquier
        entrada con extensiones; con extensiones se ordena por la dominante.
        """
        if not self.file_extensions:
            return (0, self.name)
        return (1, self.file_extensions[0])

    def compare(self, other: Any) -> int:
        """
        Compara con otra entrada.

        Returns:
            -1, 0 o 1. Si `other` no es un MimeType, esta entrada va después (1).
        """
        if not isinstance(other, MimeType):
            return 1
        mine, theirs = self.sort_key(), other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


MimeType.EMPTY = MimeType()
