# mimeutils/serialization/xml_codec.py
"""
Codec XML para MimeType.

Forma del elemento:

    <MimeType primary="true">
      <Name>Plain Text</Name>
      <Description>...</Description>
      <FileExt>.txt</FileExt>
      <ContentType>text/plain</ContentType>
      <Category>Text</Category>
    </MimeType>

FileExt y ContentType se repiten una vez por elemento, en orden.
Los campos ausentes toman su valor por defecto.
"""
from typing import Any, Dict, Optional, Union

from lxml import etree
from pydantic import ValidationError

from mimeutils.config.settings import get_settings
from mimeutils.domain.mime_type import MimeType
from mimeutils.exceptions import FormatError
from mimeutils.logger import get_logger
from mimeutils.schemas.mime_type_schema import MimeTypeSchema

logger = get_logger(__name__)

ROOT_TAG = "MimeType"
PRIMARY_ATTR = "primary"
TEXT_TAGS = ("Name", "Description", "Category")
REPEATED_TAGS = ("FileExt", "ContentType")

# xs:boolean
_BOOLEANS = {"true": True, "1": True, "false": False, "0": False}


def _parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def to_element(entry: MimeType, omit_defaults: Optional[bool] = None) -> etree._Element:
    wire = MimeTypeSchema.from_entity(entry).to_wire(omit_defaults)

    element = etree.Element(ROOT_TAG)
    if PRIMARY_ATTR in wire:
        element.set(PRIMARY_ATTR, "true" if wire[PRIMARY_ATTR] else "false")

    for tag in ("Name", "Description"):
        if tag in wire:
            etree.SubElement(element, tag).text = wire[tag]
    for tag in REPEATED_TAGS:
        for value in wire.get(tag, []):
            etree.SubElement(element, tag).text = value
    if "Category" in wire:
        etree.SubElement(element, "Category").text = wire["Category"]

    logger.debug("Encoded MimeType %r (%d children)", entry.name, len(element))
    return element


def dumps(
    entry: MimeType,
    pretty_print: Optional[bool] = None,
    omit_defaults: Optional[bool] = None,
) -> str:
    if pretty_print is None:
        pretty_print = get_settings().xml_pretty_print
    return etree.tostring(
        to_element(entry, omit_defaults=omit_defaults),
        encoding="unicode",
        pretty_print=pretty_print,
    )


def _parse_primary(raw: Optional[str]) -> bool:
    if raw is None:
        return False
    try:
        return _BOOLEANS[raw.strip().lower()]
    except KeyError:
        raise FormatError(PRIMARY_ATTR, raw) from None


def _element_to_wire(element: etree._Element) -> Dict[str, Any]:
    if element.tag != ROOT_TAG:
        raise FormatError(ROOT_TAG, element.tag, f"Expected <{ROOT_TAG}> element, got <{element.tag}>")

    wire: Dict[str, Any] = {
        PRIMARY_ATTR: _parse_primary(element.get(PRIMARY_ATTR)),
        "FileExt": [],
        "ContentType": [],
    }
    for child in element:
        if not isinstance(child.tag, str):
            continue
        text = child.text or ""
        if child.tag in REPEATED_TAGS:
            wire[child.tag].append(text)
        elif child.tag in TEXT_TAGS:
            wire[child.tag] = text
        else:
            logger.debug("Ignoring unknown element <%s> in <%s>", child.tag, ROOT_TAG)
    return wire


def from_element(element: etree._Element) -> MimeType:
    """
    Lee un elemento <MimeType>.

    Raises:
        FormatError: si el elemento, la categoría, el atributo primary o
            alguna extensión / content type no tienen formato válido.
    """
    try:
        wire = _element_to_wire(element)
        entry = MimeTypeSchema.model_validate(wire).to_entity()
    except FormatError as e:
        logger.warning(
            "Rejected <%s> element (line %s): %s",
            ROOT_TAG,
            element.sourceline,
            e,
        )
        raise
    except ValidationError as e:
        logger.warning("Rejected <%s> element (line %s): %s", ROOT_TAG, element.sourceline, e)
        raise FormatError(ROOT_TAG, element.tag, f"Invalid <{ROOT_TAG}> element: {e}") from e

    logger.debug("Decoded MimeType %r", entry.name)
    return entry


def loads(document: Union[str, bytes]) -> MimeType:
    """
    Parsea un documento XML cuyo elemento raíz es <MimeType>.

    Raises:
        FormatError: si el XML no es válido o el contenido no tiene formato válido.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    try:
        root = etree.fromstring(document, parser=_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning("Invalid XML document for <%s>: %s", ROOT_TAG, e)
        raise FormatError(ROOT_TAG, document, f"Invalid XML document: {e}") from e
    return from_element(root)
