"""Blocs média — image, vidéo, YouTube, embed HTML."""
from typing import Literal

from ..core.schemas import ImageData
from .base import BaseBlock


class ImageBlock(BaseBlock):
    type: Literal["img"]
    image: ImageData


class YouTubeBlock(BaseBlock):
    """content = URL de la vidéo."""
    type: Literal["youtube"]
    content: str


class VideoBlock(BaseBlock):
    type: Literal["video"]
    content: str


class EmbedBlock(BaseBlock):
    """content = fragment HTML brut."""
    type: Literal["embed"]
    content: str
