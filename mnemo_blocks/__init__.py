"""
MNEMO blocks — validation + normalisation des arbres de blocs de page.

Usage:
    >>> from mnemo_blocks import validate, dump_tree
    >>> items = validate([{"id": "block-1", "type": "p", "content": "Bonjour"}])
    >>> dump_tree(items)
    [{'id': 'block-1', 'type': 'p', 'content': 'Bonjour'}]

Usage (chunks stockés):
    >>> from mnemo_blocks import map_chunk_to_item
    >>> map_chunk_to_item({"id": 7, "type": "text", "data": "not json"}).content
    'not json'
"""
__version__ = "0.1.0"

from .core.errors import BlockValidationError, ChunkPayloadError
from .core.schemas import ImageData, ButtonData, LinkData, TextFormat
from .blocks import (
    DroppedItem, BaseBlock,
    HeadingBlock, ParagraphBlock, RichTextBlock,
    ImageBlock, YouTubeBlock, VideoBlock, EmbedBlock,
    ButtonBlock, LinkBlock,
    ListBlock, PostAccordionBlock,
    BlockUnion, BLOCK_LABELS, BLOCK_REGISTRY, BLOCK_TYPES,
    get_semantic_label,
)
from .validator import validate, dump_tree, walk_blocks, duplicate_ids
from .mapper import (
    DataChunkLike, map_chunk_to_item, map_chunks_to_items,
    programme_lookup, resolve_chunk_data,
    MappedChunk, map_chunk_payload,
)

__all__ = [
    "BlockValidationError", "ChunkPayloadError",
    "ImageData", "ButtonData", "LinkData", "TextFormat",
    "DroppedItem", "BaseBlock",
    "HeadingBlock", "ParagraphBlock", "RichTextBlock",
    "ImageBlock", "YouTubeBlock", "VideoBlock", "EmbedBlock",
    "ButtonBlock", "LinkBlock",
    "ListBlock", "PostAccordionBlock",
    "BlockUnion", "BLOCK_LABELS", "BLOCK_REGISTRY", "BLOCK_TYPES",
    "get_semantic_label",
    "validate", "dump_tree", "walk_blocks", "duplicate_ids",
    "DataChunkLike", "map_chunk_to_item", "map_chunks_to_items",
    "programme_lookup", "resolve_chunk_data",
    "MappedChunk", "map_chunk_payload",
]
