from datetime import date
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SeriesMembership(BaseModel):
    """A post's place in a named series.

    ``order`` is ``None`` when the author named a series but gave no usable
    numeric order; such posts are left out of series navigation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    order: Optional[float] = None


class Heading(BaseModel):
    model_config = ConfigDict(frozen=True)

    depth: int
    text: str
    slug: str


class PostRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    lang: str
    title: str
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    published: Optional[date] = None
    edited: Optional[date] = None
    series: Optional[SeriesMembership] = None
    translations: Dict[str, str] = Field(default_factory=dict)
    collection_slug: Optional[str] = None
    authors: Tuple[str, ...] = ()
    original_link: Optional[str] = None
    source_path: Optional[str] = None
    reading_time: Optional[str] = None
    headings: Tuple[Heading, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _drop_own_translation(cls, data):
        if isinstance(data, dict) and data.get("translations"):
            lang = data.get("lang")
            data = {
                **data,
                "translations": {
                    k: v for k, v in data["translations"].items() if k != lang
                },
            }
        return data
