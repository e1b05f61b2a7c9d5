"""
DataChunk → DroppedItem (chemin de lecture, best-effort).

Un chunk stocké devient un bloc ; `data` peut être un objet JSON ou une
chaîne JSON-encodée. Ne lève jamais : un chunk legacy mal formé dégrade en
`content` texte au lieu de bloquer l'assemblage de la page.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, TypeAdapter, ValidationError, field_validator

from .. import config
from ..blocks import DroppedItem
from ..core.schemas import ImageData, ButtonData, LinkData, TextFormat

log = logging.getLogger(__name__)

# Types des data chunks → tags de blocs
CHUNK_TYPE_ALIASES: Dict[str, str] = {
    "text":      "p",
    "rich_text": "rich-text",
    "image":     "img",
}

_DEFAULT_IMAGE_WIDTH  = 800
_DEFAULT_IMAGE_HEIGHT = 600

_STR       = TypeAdapter(str)
_LIST_TYPE = TypeAdapter(DroppedItem.model_fields["list_type"].annotation)
_CHILDREN  = TypeAdapter(List[DroppedItem])

ChunkData = Union[Dict[str, Any], str]


class DataChunkLike(BaseModel):
    """Chunk tel que renvoyé par la base ou l'API (programme_id ou programmeId)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    type: str = ""
    data: Optional[ChunkData] = None
    programme_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("programme_id", "programmeId"),
    )

    @field_validator("id", "type", mode="before")
    @classmethod
    def _stringify(cls, v):
        return "" if v is None else str(v)

    @field_validator("programme_id", mode="before")
    @classmethod
    def _stringify_ref(cls, v):
        return v if v is None else str(v)

    @field_validator("data", mode="before")
    @classmethod
    def _data_as_json_or_str(cls, v):
        if v is None or isinstance(v, (dict, str)):
            return v
        return json.dumps(v, default=str)


def resolve_chunk_data(data: Optional[ChunkData]) -> Dict[str, Any]:
    """Objet JSON, chaîne JSON ou texte brut → dict. Texte non-JSON → {"content": texte}."""
    if data is None:
        return {}
    if isinstance(data, dict):
        return data
    try:
        parsed = json.loads(data)
    except ValueError:
        log.debug("data chunk non-JSON, repli sur content")
        return {"content": data}
    if isinstance(parsed, dict):
        return parsed
    return {"content": data}


def programme_lookup(programmes: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """[{id, shortTitle}, …] → {id: shortTitle}."""
    lookup = {}
    for p in programmes:
        short = p.get("shortTitle") or p.get("short_title") or p.get("title")
        if p.get("id") is not None and short:
            lookup[str(p["id"])] = short
    return lookup


def _coerce(model: Any, value: Any, field: str, chunk_id: str) -> Any:
    """Valide `value` (modèle ou TypeAdapter) ; None si invalide (champ ignoré)."""
    if value is None:
        return None
    try:
        if isinstance(model, TypeAdapter):
            return model.validate_python(value)
        return model.model_validate(value)
    except ValidationError:
        log.warning("Chunk %s : champ %s ignoré (forme invalide)", chunk_id, field)
        return None


def _image(payload: Dict[str, Any], chunk_id: str) -> Optional[ImageData]:
    image = payload.get("image")
    if not image and not payload.get("url"):
        return None
    nested = image if isinstance(image, dict) else {}
    candidate = {
        "src":    payload.get("url") or nested.get("src") or "",
        "alt":    payload.get("alt") or nested.get("alt") or "",
        "width":  payload.get("width") or nested.get("width") or _DEFAULT_IMAGE_WIDTH,
        "height": payload.get("height") or nested.get("height") or _DEFAULT_IMAGE_HEIGHT,
    }
    return _coerce(ImageData, candidate, "image", chunk_id) or ImageData(
        src=str(candidate["src"]), alt=str(candidate["alt"]),
        width=_DEFAULT_IMAGE_WIDTH, height=_DEFAULT_IMAGE_HEIGHT,
    )


def _button(payload: Dict[str, Any], chunk_id: str) -> Optional[ButtonData]:
    button = payload.get("button")
    if not isinstance(button, dict):
        return None
    return _coerce(ButtonData, {
        "url":        button.get("url") or "",
        "isExternal": button.get("isExternal", False),
    }, "button", chunk_id)


def map_chunk_to_item(
    chunk: Union[DataChunkLike, Mapping[str, Any]],
    programmes: Optional[Mapping[str, str]] = None,
) -> DroppedItem:
    """
    Traduit un chunk en un bloc (1:1, pas de récursion).

    `programmes` : {programme_id: nom court} ; à défaut, UNKNOWN_PROGRAMME.
    """
    if not isinstance(chunk, DataChunkLike):
        chunk = DataChunkLike.model_validate(dict(chunk))

    payload = resolve_chunk_data(chunk.data)
    content = payload.get("content")
    if content is None:
        content = ""
    elif not isinstance(content, str):
        content = json.dumps(content, default=str)

    programme = (programmes or {}).get(chunk.programme_id or "", config.UNKNOWN_PROGRAMME)

    return DroppedItem(
        id=chunk.id,
        type=CHUNK_TYPE_ALIASES.get(chunk.type, chunk.type),
        content=content,
        programme=programme,
        image=_image(payload, chunk.id),
        button=_button(payload, chunk.id),
        format=_coerce(TextFormat, payload.get("format"), "format", chunk.id),
        container_type=_coerce(_STR, payload.get("containerType"), "containerType", chunk.id),
        list_type=_coerce(_LIST_TYPE, payload.get("listType"), "listType", chunk.id),
        link=_coerce(LinkData, payload.get("link"), "link", chunk.id),
        children=_coerce(_CHILDREN, payload.get("children"), "children", chunk.id),
    )


def map_chunks_to_items(
    chunks: Iterable[Union[DataChunkLike, Mapping[str, Any]]],
    programmes: Optional[Mapping[str, str]] = None,
) -> List[DroppedItem]:
    return [map_chunk_to_item(c, programmes) for c in chunks]
