"""
Blocs — exports publics + BlockUnion discriminé par `type`.
"""
from typing import Annotated, Dict, List, Union
from pydantic import Field

from .base import DroppedItem, BaseBlock
from .text import HeadingBlock, ParagraphBlock, RichTextBlock
from .media import ImageBlock, YouTubeBlock, VideoBlock, EmbedBlock
from .action import ButtonBlock, LinkBlock
from .container import ListBlock, PostAccordionBlock

# Union discriminée par type — `children` de chaque variante la réutilise
BlockUnion = Annotated[
    Union[
        HeadingBlock,
        ParagraphBlock,
        RichTextBlock,
        ImageBlock,
        YouTubeBlock,
        VideoBlock,
        EmbedBlock,
        ButtonBlock,
        LinkBlock,
        ListBlock,
        PostAccordionBlock,
    ],
    Field(discriminator="type"),
]

_VARIANTS = [
    HeadingBlock, ParagraphBlock, RichTextBlock,
    ImageBlock, YouTubeBlock, VideoBlock, EmbedBlock,
    ButtonBlock, LinkBlock,
    ListBlock, PostAccordionBlock,
]

for _cls in [BaseBlock, *_VARIANTS]:
    _cls.model_rebuild()

BLOCK_LABELS: Dict[str, str] = {
    "h1":            "Heading 1",
    "h2":            "Heading 2",
    "h3":            "Heading 3",
    "h4":            "Heading 4",
    "h5":            "Heading 5",
    "h6":            "Heading 6",
    "p":             "Paragraph",
    "img":           "Image",
    "ul":            "Bullet List",
    "youtube":       "YouTube Video",
    "button":        "Button",
    "link":          "Link",
    "video":         "Video",
    "rich-text":     "Rich Text",
    "embed":         "Embed",
    "postAccordion": "Post Accordion",
}


def _tags(cls) -> List[str]:
    return list(cls.model_fields["type"].annotation.__args__)


# tag → variante
BLOCK_REGISTRY: Dict[str, type] = {tag: cls for cls in _VARIANTS for tag in _tags(cls)}
BLOCK_TYPES = frozenset(BLOCK_REGISTRY)


def get_semantic_label(block_type: str) -> str:
    """Libellé lisible d'un tag ("postAccordion" → "Post Accordion")."""
    return BLOCK_LABELS.get(block_type, block_type)


__all__ = [
    "DroppedItem", "BaseBlock",
    "HeadingBlock", "ParagraphBlock", "RichTextBlock",
    "ImageBlock", "YouTubeBlock", "VideoBlock", "EmbedBlock",
    "ButtonBlock", "LinkBlock",
    "ListBlock", "PostAccordionBlock",
    "BlockUnion", "BLOCK_LABELS", "BLOCK_REGISTRY", "BLOCK_TYPES",
    "get_semantic_label",
]
