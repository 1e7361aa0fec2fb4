"""Dictionary cross-links.

Each dictionary attribute learns which descriptors use it, and each object
learns which descriptors reach it through an ``object_type`` attribute. An
attribute used somewhere but missing from the dictionary file still surfaces
as a (links-only) dictionary entry.
"""

import logging
from collections.abc import Iterable, Mapping

from schema_cache.core.classes import BASE_EVENT
from schema_cache.models import LINKS_KEY, ClassDescriptor, Descriptor, Dictionary, Link, ObjectDescriptor

logger = logging.getLogger(__name__)


def _sorted_links(links: Iterable[Link]) -> list[Link]:
    return sorted(set(links), key=lambda link: (link.group, link.type))


def collect_links(
    common: ClassDescriptor | None,
    classes: Mapping[str, ClassDescriptor],
    objects: Mapping[str, ObjectDescriptor],
) -> dict[str, list[Link]]:
    groups: list[tuple[str, Mapping[str, Descriptor]]] = [
        ("common", {BASE_EVENT: common} if common is not None else {}),
        ("class", classes),
        ("object", objects),
    ]

    links: dict[str, list[Link]] = {}
    for group, descriptors in groups:
        for name, descriptor in descriptors.items():
            link = Link(group=group, type=name, caption=descriptor.display_name)
            for attribute in descriptor.attributes:
                links.setdefault(attribute, []).append(link)
    return links


def update_dictionary(
    dictionary: Dictionary,
    common: ClassDescriptor | None,
    classes: Mapping[str, ClassDescriptor],
    objects: Mapping[str, ObjectDescriptor],
) -> Dictionary:
    attributes = dict(dictionary.attributes)
    for name, links in collect_links(common, classes, objects).items():
        entry = attributes.get(name)
        if entry is None:
            logger.warning("undefined attribute: %s", name)
            entry = {}
        attributes[name] = {**entry, LINKS_KEY: [link.model_dump() for link in _sorted_links(links)]}
    return dictionary.model_copy(update={"attributes": attributes})


def update_objects(dictionary: Dictionary, objects: Mapping[str, ObjectDescriptor]) -> dict[str, ObjectDescriptor]:
    referrers: dict[str, list[Link]] = {}
    for attribute in dictionary.attributes.values():
        object_type = attribute.get("object_type")
        if object_type in objects:
            referrers.setdefault(object_type, []).extend(
                Link.model_validate(link) for link in attribute.get(LINKS_KEY, [])
            )

    return {
        name: obj.model_copy(update={"links": _sorted_links(referrers[name])}) if name in referrers else obj
        for name, obj in objects.items()
    }
