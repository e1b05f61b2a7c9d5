"""Blocs texte — titres, paragraphe, rich text."""
from typing import Literal

from .base import BaseBlock


class HeadingBlock(BaseBlock):
    type: Literal["h1", "h2", "h3", "h4", "h5", "h6"]
    content: str


class ParagraphBlock(BaseBlock):
    type: Literal["p"]
    content: str


class RichTextBlock(BaseBlock):
    """HTML produit par l'éditeur rich text."""
    type: Literal["rich-text"]
    content: str
