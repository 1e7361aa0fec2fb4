"""Class enrichment: identifier enumerations and attribute provenance.

Only classes with a ``uid`` survive; the rest exist to be extended from.
Every surviving class receives three synthesized enumerations:

- ``class_id``: the class's own uid,
- ``category_id``: the id of the category the class belongs to,
- ``event_uid``: ``uid * 1000 + disposition`` for every disposition value,
  plus the ``Unknown`` and ``Other`` sentinels.
"""

import logging
from collections.abc import Mapping

from schema_cache.core.errors import InvalidCategoryError
from schema_cache.models import SOURCE_KEY, AttributeOverride, Category, ClassDescriptor

logger = logging.getLogger(__name__)

BASE_EVENT = "base_event"
EVENT_UID_FACTOR = 1000
UNKNOWN_DISPOSITION = 0
OTHER_EVENT_UID = -1


def make_event_uid(class_uid: int, disposition: int) -> str:
    return str(class_uid * EVENT_UID_FACTOR + disposition)


def make_event_name(caption: str, name: str | None) -> str:
    return f"{caption}: {name}"


def stamp_source(attributes: Mapping[str, AttributeOverride], owner: str) -> dict[str, AttributeOverride]:
    """Mark every attribute not yet carrying provenance as owned by ``owner``."""
    return {
        key: attribute if SOURCE_KEY in attribute else {**attribute, SOURCE_KEY: owner}
        for key, attribute in attributes.items()
    }


def event_uid_attribute(name: str, cls: ClassDescriptor, uid: int) -> AttributeOverride:
    attributes = cls.attributes
    disposition = attributes.get("disposition_id") or {}
    caption = cls.display_name

    enum: dict[str, dict[str, object]] = {}
    for key, value in (disposition.get("enum") or {}).items():
        try:
            code = int(key)
        except ValueError:
            logger.warning("%s: ignoring non-numeric disposition_id value %r", name, key)
            continue
        enum[make_event_uid(uid, code)] = {**value, "name": make_event_name(caption, value.get("name"))}

    enum[str(OTHER_EVENT_UID)] = {"name": make_event_name(caption, "Other")}
    enum[make_event_uid(uid, UNKNOWN_DISPOSITION)] = {"name": make_event_name(caption, "Unknown")}

    return {**attributes.get("event_uid", {}), "enum": enum, SOURCE_KEY: name}


def class_id_attribute(name: str, cls: ClassDescriptor, uid: int) -> AttributeOverride:
    enum = {str(uid): {"name": cls.name, "description": cls.description}}
    return {**cls.attributes.get("class_id", {}), "enum": enum, SOURCE_KEY: name}


def category_id_attribute(name: str, cls: ClassDescriptor, categories: Mapping[str, Category]) -> AttributeOverride:
    category = categories.get(cls.category) if cls.category is not None else None
    if category is None:
        raise InvalidCategoryError(cls.display_name, cls.category)

    enum = {str(category.id): category.model_dump(exclude={"class_id_range"}, exclude_none=True)}
    return {**cls.attributes.get("category_id", {}), "enum": enum, SOURCE_KEY: name}


def enrich_class(name: str, cls: ClassDescriptor, uid: int, categories: Mapping[str, Category]) -> ClassDescriptor:
    attributes = stamp_source(cls.attributes, name)
    attributes["event_uid"] = event_uid_attribute(name, cls, uid)
    attributes["class_id"] = class_id_attribute(name, cls, uid)
    attributes["category_id"] = category_id_attribute(name, cls, categories)
    return cls.model_copy(update={"attributes": attributes})


def enrich_classes(
    classes: Mapping[str, ClassDescriptor], categories: Mapping[str, Category]
) -> dict[str, ClassDescriptor]:
    enriched: dict[str, ClassDescriptor] = {}
    for name, cls in classes.items():
        if cls.uid is None:
            logger.debug("dropping intermediate class: %s", name)
            continue
        enriched[name] = enrich_class(name, cls, cls.uid, categories)
    return enriched
