# mimeutils/schemas/mime_type_schema.py
"""
Forma del documento de un MimeType (dict / JSON).
Los alias corresponden a los nombres de elemento usados en el XML.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mimeutils.config.settings import get_settings
from mimeutils.domain.mime_category import MimeCategory
from mimeutils.domain.mime_type import MimeType


class MimeTypeSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", alias="Name", description="Nombre canónico del tipo")
    description: str = Field("", alias="Description", description="Descripción legible")
    file_extensions: List[Any] = Field(
        default_factory=list, alias="FileExt", description="Extensiones, la primera es la dominante"
    )
    content_types: List[Any] = Field(
        default_factory=list, alias="ContentType", description="Content types, el primero es el dominante"
    )
    category: str = Field(MimeCategory.UNKNOWN.value, alias="Category", description="Categoría del tipo")
    primary: bool = Field(False, alias="primary", description="Preferido si la resolución es ambigua")

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def _none_as_empty_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, MimeCategory):
            return value.value
        return value

    @field_validator("file_extensions", "content_types", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        # Un solo elemento repetido puede llegar como escalar
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("primary", mode="before")
    @classmethod
    def _none_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def from_entity(cls, entry: MimeType) -> "MimeTypeSchema":
        return cls(
            name=entry.name,
            description=entry.description,
            file_extensions=list(entry.file_extensions),
            content_types=list(entry.content_types),
            category=entry.category.value,
            primary=entry.primary,
        )

    def to_entity(self) -> MimeType:
        """
        Construye la entidad. Las extensiones y content types se validan aquí.

        Raises:
            FormatError: si algún elemento o la categoría no tienen formato válido.
        """
        return MimeType(
            name=self.name,
            description=self.description,
            file_extensions=self.file_extensions,
            content_types=self.content_types,
            category=MimeCategory.parse(self.category),
            primary=self.primary,
        )

    def to_wire(self, omit_defaults: Optional[bool] = None) -> Dict[str, Any]:
        """Dict con los nombres del documento; omite valores por defecto según settings."""
        if omit_defaults is None:
            omit_defaults = get_settings().omit_defaults
        data = self.model_dump(by_alias=True)
        if not omit_defaults:
            return data
        defaults = MimeTypeSchema().model_dump(by_alias=True)
        return {key: value for key, value in data.items() if value != defaults[key]}
