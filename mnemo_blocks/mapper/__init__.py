"""Mappers — chunk stocké → bloc (lecture), payload de chunk (écriture)."""
from .chunk import (
    DataChunkLike,
    CHUNK_TYPE_ALIASES,
    resolve_chunk_data,
    programme_lookup,
    map_chunk_to_item,
    map_chunks_to_items,
)
from .payload import ChunkMetaData, ImagePayload, MappedChunk, map_chunk_payload

__all__ = [
    "DataChunkLike",
    "CHUNK_TYPE_ALIASES",
    "resolve_chunk_data",
    "programme_lookup",
    "map_chunk_to_item",
    "map_chunks_to_items",
    "ChunkMetaData",
    "ImagePayload",
    "MappedChunk",
    "map_chunk_payload",
]
