from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Attribute maps stay open containers: a dictionary definition or a
# descriptor override may carry any field (enum, object_type, profiles, ...).
AttributeDefinition = dict[str, Any]
AttributeOverride = dict[str, Any]

SOURCE_KEY = "_source"
LINKS_KEY = "_links"


class SchemaVersion(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    version: str


class Category(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: int
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    class_id_range: Any = None


class Categories(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str | None = None
    caption: str | None = None
    description: str | None = None
    attributes: dict[str, Category] = Field(default_factory=dict)


class Dictionary(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str | None = None
    caption: str | None = None
    description: str | None = None
    attributes: dict[str, AttributeDefinition] = Field(default_factory=dict)


class Link(BaseModel):
    """A back reference from an attribute or object to a descriptor using it."""

    model_config = ConfigDict(frozen=True)

    group: str
    type: str
    caption: str | None = None


class SeeAlsoLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference: str
    caption: str | None = None


class Descriptor(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    extends: str | None = None
    attributes: dict[str, AttributeOverride] = Field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.name or self.caption or "UNKNOWN"


class ClassDescriptor(Descriptor):
    uid: int | None = None
    category: str | None = None
    see_also: list[SeeAlsoLink | str] | None = None


class ObjectDescriptor(Descriptor):
    links: list[Link] | None = None


class CategoryWithClasses(Category):
    classes: list[ClassDescriptor] = Field(default_factory=list)
