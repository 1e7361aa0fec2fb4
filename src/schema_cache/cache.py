"""The schema cache: the resolved, read-only schema model.

A ``Cache`` is built once (see ``schema_cache.core.build``) and never
mutated afterwards, so any number of readers may share it without locking.
Every query hands out a deep copy, so callers may edit what they get back.
Lookups by identifier return ``None`` when nothing matches.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar, overload

from schema_cache.core.classes import BASE_EVENT
from schema_cache.core.merge import deep_merge
from schema_cache.models import (
    Categories,
    CategoryWithClasses,
    ClassDescriptor,
    Descriptor,
    Dictionary,
    ObjectDescriptor,
    SchemaVersion,
)

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Descriptor)


def _listing(descriptors: Mapping[str, D]) -> Mapping[str, D]:
    return MappingProxyType({name: descriptor.model_copy(deep=True) for name, descriptor in descriptors.items()})


class Cache:
    def __init__(
        self,
        version: SchemaVersion,
        dictionary: Dictionary,
        categories: Categories,
        common: ClassDescriptor | None,
        classes: Mapping[str, ClassDescriptor],
        objects: Mapping[str, ObjectDescriptor],
    ) -> None:
        self._version = version
        self._dictionary = dictionary
        self._categories = categories
        self._common = common
        self._classes: Mapping[str, ClassDescriptor] = MappingProxyType(dict(classes))
        self._objects: Mapping[str, ObjectDescriptor] = MappingProxyType(dict(objects))

    def version(self) -> str:
        return self._version.version

    def dictionary(self) -> Dictionary:
        return self._dictionary.model_copy(deep=True)

    @overload
    def categories(self) -> Categories: ...

    @overload
    def categories(self, id: str) -> CategoryWithClasses | None: ...

    def categories(self, id: str | None = None) -> Categories | CategoryWithClasses | None:
        """Return all categories, or one category with the classes that belong to it."""
        if id is None:
            return self._categories.model_copy(deep=True)

        category = self._categories.attributes.get(id)
        if category is None:
            return None

        members = [cls.model_copy(deep=True) for cls in self._classes.values() if cls.category == id]
        return CategoryWithClasses.model_validate({**category.model_dump(), "classes": members})

    @overload
    def classes(self) -> Mapping[str, ClassDescriptor]: ...

    @overload
    def classes(self, id: str) -> ClassDescriptor | None: ...

    def classes(self, id: str | None = None) -> Mapping[str, ClassDescriptor] | ClassDescriptor | None:
        """Return all classes, or one class enriched with its dictionary definitions.

        ``base_event`` names the common attribute set shared by every class.
        """
        if id is None:
            return _listing(self._classes)

        if id == BASE_EVENT:
            return self._enrich(self._common) if self._common is not None else None

        cls = self._classes.get(id)
        return self._enrich(cls) if cls is not None else None

    def find_class(self, uid: int) -> ClassDescriptor | None:
        for cls in self._classes.values():
            if cls.uid == uid:
                return self._enrich(cls)
        return None

    @overload
    def objects(self) -> Mapping[str, ObjectDescriptor]: ...

    @overload
    def objects(self, id: str) -> ObjectDescriptor | None: ...

    def objects(self, id: str | None = None) -> Mapping[str, ObjectDescriptor] | ObjectDescriptor | None:
        if id is None:
            return _listing(self._objects)

        obj = self._objects.get(id)
        return self._enrich(obj) if obj is not None else None

    def _enrich(self, descriptor: D) -> D:
        definitions = self._dictionary.attributes
        attributes = {}
        for name, attribute in descriptor.attributes.items():
            base = definitions.get(name)
            if base is None:
                # only hand-built caches get here; build_cache defines every used attribute
                logger.warning("undefined attribute: %s", name)
                attributes[name] = copy.deepcopy(attribute)
            else:
                attributes[name] = deep_merge(base, attribute)
        return descriptor.model_copy(update={"attributes": attributes}, deep=True)
