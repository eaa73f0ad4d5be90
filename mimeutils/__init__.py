from mimeutils.domain.mime_category import MimeCategory
from mimeutils.domain.mime_type import MimeType
from mimeutils.exceptions import FormatError

__all__ = ["FormatError", "MimeCategory", "MimeType"]
