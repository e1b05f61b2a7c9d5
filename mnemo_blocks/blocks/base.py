"""
Blocs de base.

DroppedItem : forme générique d'un bloc (tag libre) — utilisée côté lecture.
BaseBlock   : parent des variantes validées ; `children` réutilise l'union
              discriminée BlockUnion (résolue dans blocks/__init__.py).
"""
from typing import List, Literal, Optional

from ..core.schemas import CamelModel, ImageData, ButtonData, LinkData, TextFormat


class DroppedItem(CamelModel):
    """Un nœud de l'arbre de contenu d'une page."""
    id: str
    type: str
    content: Optional[str] = None
    programme: Optional[str] = None
    image: Optional[ImageData] = None
    button: Optional[ButtonData] = None
    format: Optional[TextFormat] = None
    container_type: Optional[str] = None
    list_type: Optional[Literal["bullet", "numbered"]] = None
    link: Optional[LinkData] = None
    children: Optional[List["DroppedItem"]] = None


class BaseBlock(DroppedItem):
    """Bloc validé (classe parente de toutes les variantes)."""
    children: Optional[List["BlockUnion"]] = None  # noqa: F821
