"""
Content negotiation for JSON and XML.

Request bodies are decoded according to ``Content-Type`` and responses
are encoded according to ``Accept``.  Both representations carry the
same field names; XML wraps them in a root element named after the
shape (``UserRest``, ``ErrorMessage``) and renders lists as a ``List``
element with one ``item`` child per entry.
"""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Tuple

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"

_JSON_TYPES = {"application/json"}
_XML_TYPES = {"application/xml", "text/xml"}

LIST_ROOT = "List"
LIST_ITEM = "item"

logger = logging.getLogger(__name__)


def _media_type(header_value: str) -> str:
    return header_value.split(";", 1)[0].strip().lower()


def _parse_accept(header_value: str) -> List[Tuple[str, float, int]]:
    """Split an ``Accept`` header into ``(media_type, quality, position)``."""
    ranges = []
    for position, part in enumerate(header_value.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        media = pieces[0].lower()
        if not media:
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        ranges.append((media, quality, position))
    return ranges


def wants_xml(request: Request) -> bool:
    """Return True when the client prefers XML over JSON.

    JSON wins ties, missing headers and wildcards.
    """
    accept = request.headers.get("accept")
    if not accept:
        return False
    best_json = best_xml = None
    for media, quality, position in _parse_accept(accept):
        if quality <= 0:
            continue
        rank = (quality, -position)
        if media in _XML_TYPES and (best_xml is None or rank > best_xml):
            best_xml = rank
        elif media in _JSON_TYPES and (best_json is None or rank > best_json):
            best_json = rank
    if best_xml is None:
        return False
    return best_json is None or best_xml > best_json


def _element_to_value(element: ET.Element) -> Any:
    children = list(element)
    if children:
        return {child.tag: _element_to_value(child) for child in children}
    text = (element.text or "").strip()
    return text or None


def parse_xml(raw: bytes) -> Dict[str, Any]:
    """Decode an XML document whose root children are the fields."""
    root = ET.fromstring(raw)
    return {child.tag: _element_to_value(child) for child in root}


def _append_value(parent: ET.Element, value: Any) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            child = ET.SubElement(parent, str(key))
            _append_value(child, item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            child = ET.SubElement(parent, LIST_ITEM)
            _append_value(child, item)
    elif value is None:
        return
    elif isinstance(value, bool):
        parent.text = "true" if value else "false"
    else:
        parent.text = str(value)


def to_xml(root: str, content: Any) -> bytes:
    element = ET.Element(LIST_ROOT if isinstance(content, (list, tuple)) else root)
    _append_value(element, content)
    return ET.tostring(element, encoding="utf-8", xml_declaration=True)


async def read_body(request: Request) -> Any:
    """Decode the request body according to its ``Content-Type``.

    Raises ``HTTPException`` with 415 for unsupported media types and
    400 for bodies that do not parse.
    """
    content_type = _media_type(request.headers.get("content-type", JSON_MEDIA_TYPE))
    raw = await request.body()
    if content_type in _JSON_TYPES:
        try:
            return json.loads(raw or b"null")
        except ValueError as exc:
            logger.info("Rejected malformed JSON body: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON request body"
            ) from exc
    if content_type in _XML_TYPES:
        try:
            return parse_xml(raw)
        except ET.ParseError as exc:
            logger.info("Rejected malformed XML body: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed XML request body"
            ) from exc
    raise HTTPException(
        status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
        detail=f"Content type '{content_type}' not supported",
    )


def render(request: Request, content: Any, root: str, status_code: int = status.HTTP_200_OK) -> Response:
    """Encode ``content`` in the representation the client asked for."""
    if wants_xml(request):
        return Response(
            content=to_xml(root, content), status_code=status_code, media_type=XML_MEDIA_TYPE
        )
    return JSONResponse(content=content, status_code=status_code)
