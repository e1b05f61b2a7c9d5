"""
Payload de data chunk (chemin d'écriture) — text / rich_text / image.

Contrairement au mapper de lecture, ici tout écart est refusé : le chunk
n'est créé que si le payload passe.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..core.errors import ChunkPayloadError

_DEFAULT_ALT = "Image without description"


class ChunkMetaData(BaseModel):
    version: str = "1.0"
    editor: str
    datePublished: Optional[str] = None
    website: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class ImagePayload(BaseModel):
    url: str
    alt: str


class MappedChunk(BaseModel):
    data: Union[ImagePayload, str]
    metaData: ChunkMetaData


def _clean_keywords(raw: Any) -> List[str]:
    if not isinstance(raw, list):
        return []
    seen: Dict[str, None] = {}
    for k in raw:
        if isinstance(k, str):
            seen.setdefault(k.lower(), None)
    return list(seen)


def _meta(meta: Dict[str, Any]) -> ChunkMetaData:
    editor = meta.get("editor")
    if not isinstance(editor, str) or not editor.strip():
        raise ChunkPayloadError("Editor is required in metaData.")
    version = meta.get("version")
    date_published = meta.get("datePublished")
    website = meta.get("website")
    return ChunkMetaData(
        version=version.strip() if isinstance(version, str) else "1.0",
        editor=editor.strip(),
        datePublished=date_published if isinstance(date_published, str) and date_published else None,
        website=website.strip() if isinstance(website, str) and website else None,
        keywords=_clean_keywords(meta.get("keywords")),
    )


def map_chunk_payload(data: Any, meta: Any, chunk_type: str) -> MappedChunk:
    """
    Valide et nettoie le payload d'un chunk avant insertion.

    text / rich_text : chaîne non vide, trimée.
    image            : URL http(s) → {url, alt}.
    """
    if not isinstance(meta, dict):
        raise ChunkPayloadError("Invalid metaData: must be an object.")

    if chunk_type in ("text", "rich_text"):
        if not isinstance(data, str) or not data.strip():
            raise ChunkPayloadError("Invalid text data: must be a non-empty string.")
        clean: Union[ImagePayload, str] = data.strip()
    elif chunk_type == "image":
        if not isinstance(data, str) or not data.startswith("http"):
            raise ChunkPayloadError("Invalid image data: must be a valid URL.")
        alt = meta.get("alt")
        clean = ImagePayload(url=data, alt=alt.strip() if isinstance(alt, str) else _DEFAULT_ALT)
    else:
        raise ChunkPayloadError(f"Unsupported chunk type: {chunk_type!r}")

    return MappedChunk(data=clean, metaData=_meta(meta))
