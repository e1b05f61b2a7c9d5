"""
Data models — Page, DataChunk, Programme
SQLAlchemy (SQLite, colonnes JSON) + schémas Pydantic v2 des requêtes
"""
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class ProgrammeDB(Base):
    __tablename__ = "programmes"
    id:          Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title:       Mapped[str]           = mapped_column(sa.String, nullable=False)
    short_title: Mapped[str]           = mapped_column(sa.String, nullable=False)
    acronym:     Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    created_at:  Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "shortTitle": self.short_title, "acronym": self.acronym}


class DataChunkDB(Base):
    __tablename__ = "data_chunks"
    id:           Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    programme_id: Mapped[Optional[str]] = mapped_column(sa.String, sa.ForeignKey("programmes.id"), nullable=True)
    name:         Mapped[str]           = mapped_column(sa.String, nullable=False)
    type:         Mapped[str]           = mapped_column(sa.String, nullable=False)
    data:         Mapped[Any]           = mapped_column(sa.JSON, nullable=True)
    meta_data:    Mapped[Dict]          = mapped_column(sa.JSON, default=dict)
    created_at:   Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:   Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id, "programme_id": self.programme_id, "name": self.name,
            "type": self.type, "data": self.data, "metaData": self.meta_data,
        }


class PageDB(Base):
    __tablename__ = "pages"
    id:         Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    slug:       Mapped[str]           = mapped_column(sa.String, unique=True, nullable=False)
    data:       Mapped[Any]           = mapped_column(sa.JSON, nullable=False)
    data_html:  Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)
    data_seo:   Mapped[Optional[Dict]]= mapped_column(sa.JSON, nullable=True)
    created_at: Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id, "slug": self.slug, "data": self.data,
            "dataHtml": self.data_html, "dataSeo": self.data_seo,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class PageSaveInput(BaseModel):
    """`data` reste brut : c'est le validateur de blocs qui le juge."""
    model_config = ConfigDict(populate_by_name=True)

    slug:     str = Field(..., min_length=1)
    data:     Any
    data_html: Optional[str]            = Field(default=None, alias="dataHtml")
    data_seo:  Optional[Dict[str, Any]] = Field(default=None, alias="dataSeo")


class DataChunkCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    programme_id: Optional[str]   = Field(default=None, alias="programmeId")
    name:         str
    type:         str
    data:         Any
    meta_data:    Any             = Field(default_factory=dict, alias="metaData")
