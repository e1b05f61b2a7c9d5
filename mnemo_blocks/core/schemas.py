"""
Schémas Pydantic partagés par les blocs.
Champs Python en snake_case, JSON en camelCase (containerType, isExternal…).
Booléens et dimensions stricts : "yes", 1 ou "800" sont refusés, pas convertis.
"""
from typing import Annotated, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, StrictBool, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel


def _number_only(v):
    # Une seule erreur par champ, au lieu d'une par membre de l'union.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError("Input should be a number")
    return v


Number = Annotated[Union[StrictInt, StrictFloat], BeforeValidator(_number_only)]


class CamelModel(BaseModel):
    """Base : alias camelCase, construction possible par nom Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageData(CamelModel):
    src: str
    alt: str
    width: Number
    height: Number


class ButtonData(CamelModel):
    url: str
    is_external: StrictBool = False


class LinkData(CamelModel):
    url: str
    is_external: StrictBool = False


class TextFormat(CamelModel):
    bold: Optional[StrictBool] = None
    italic: Optional[StrictBool] = None
    underline: Optional[StrictBool] = None
