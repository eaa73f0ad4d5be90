# mimeutils/config/settings.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MIMEUTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    omit_defaults: bool = Field(
        default=True,
        description="Omite en el documento los campos con su valor por defecto.",
    )
    xml_pretty_print: bool = Field(
        default=False,
        description="Indenta el XML generado.",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
