import logging
from collections.abc import Mapping

from schema_cache.models import ClassDescriptor, SeeAlsoLink

logger = logging.getLogger(__name__)


def resolve_see_also(
    see_also: list[SeeAlsoLink | str], classes: Mapping[str, ClassDescriptor]
) -> list[SeeAlsoLink]:
    links: list[SeeAlsoLink] = []
    for ref in see_also:
        if isinstance(ref, SeeAlsoLink):
            links.append(ref)
            continue

        target = classes.get(ref)
        if target is None:
            logger.debug("dropping unresolved see_also reference: %s", ref)
            continue
        links.append(SeeAlsoLink(reference=ref, caption=target.name))
    return links


def link_see_also(classes: Mapping[str, ClassDescriptor]) -> dict[str, ClassDescriptor]:
    """Replace raw ``see_also`` class names with (reference, caption) links.

    Names are resolved against the complete class set, abstract classes
    included. A class left with no resolvable reference loses the field.
    """
    linked: dict[str, ClassDescriptor] = {}
    for name, cls in classes.items():
        if cls.see_also is None:
            linked[name] = cls
            continue

        links = resolve_see_also(cls.see_also, classes)
        linked[name] = cls.model_copy(update={"see_also": links or None})
    return linked
