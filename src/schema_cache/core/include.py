import logging
from pathlib import Path
from typing import Any

from schema_cache.core.errors import DescriptorDecodeError, IncludeNotFoundError
from schema_cache.core.loader import DescriptorLoader
from schema_cache.core.merge import JObject, deep_merge, merge_all

logger = logging.getLogger(__name__)

INCLUDE_KEY = "$include"


def include_references(owner: str, include: Any) -> list[str]:
    """Normalize an include directive to an ordered list of file references."""
    if isinstance(include, str):
        return [include]
    if isinstance(include, list) and all(isinstance(ref, str) for ref in include):
        return list(include)
    raise DescriptorDecodeError(owner, f"invalid {INCLUDE_KEY} value: {include!r}")


def _without_include(data: JObject) -> JObject:
    return {key: value for key, value in data.items() if key != INCLUDE_KEY}


class IncludeResolver:
    """Expand ``$include`` directives into the descriptors that carry them.

    Included fragments form the bottom layer, merged in the order listed; the
    owning descriptor's own content is merged on top so local values win.
    Each referenced file is read at most once.
    """

    def __init__(self, loader: DescriptorLoader) -> None:
        self._loader = loader
        self._cache: dict[Path, JObject] = {}

    def resolve(self, name: str, descriptor: JObject) -> JObject:
        data = self._include_whole(name, descriptor)
        data = self._include_attributes(name, data)
        return self._include_each_attribute(name, data)

    def _include_whole(self, owner: str, data: JObject) -> JObject:
        include = data.get(INCLUDE_KEY)
        if include is None:
            return data

        fragments = [self._read(owner, ref) for ref in include_references(owner, include)]
        return deep_merge(merge_all(fragments), _without_include(data))

    def _include_attributes(self, owner: str, data: JObject) -> JObject:
        attributes = data.get("attributes")
        if not isinstance(attributes, dict) or INCLUDE_KEY not in attributes:
            return data

        fragments = [
            self._read(owner, ref).get("attributes", {})
            for ref in include_references(owner, attributes[INCLUDE_KEY])
        ]
        return {**data, "attributes": deep_merge(merge_all(fragments), _without_include(attributes))}

    def _include_each_attribute(self, owner: str, data: JObject) -> JObject:
        attributes = data.get("attributes")
        if not isinstance(attributes, dict):
            return data

        resolved = {
            key: self._include_whole(f"{owner}.{key}", attribute) if isinstance(attribute, dict) else attribute
            for key, attribute in attributes.items()
        }
        return {**data, "attributes": resolved}

    def _read(self, owner: str, reference: str) -> JObject:
        path = self._loader.home / reference
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        if not self._loader.source.is_file(path):
            raise IncludeNotFoundError(owner, path)

        logger.info("%s includes: %s", owner, path)
        fragment = self._loader.read_json(path)
        self._cache[path] = fragment
        return fragment
