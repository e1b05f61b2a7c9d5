"""Core module pour mnemo_blocks."""
from .errors import BlockValidationError, ChunkPayloadError, format_loc
from .schemas import CamelModel, ImageData, ButtonData, LinkData, TextFormat

__all__ = [
    "BlockValidationError",
    "ChunkPayloadError",
    "format_loc",
    "CamelModel",
    "ImageData",
    "ButtonData",
    "LinkData",
    "TextFormat",
]
