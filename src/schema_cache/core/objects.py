from collections.abc import Mapping

from schema_cache.core.extends import resolve_extends
from schema_cache.models import ObjectDescriptor

ABSTRACT_PREFIX = "_"


def is_abstract(name: str) -> bool:
    return name.startswith(ABSTRACT_PREFIX)


def resolve_objects(objects: Mapping[str, ObjectDescriptor]) -> dict[str, ObjectDescriptor]:
    """Flatten object ``extends`` chains, then drop abstract (template-only) objects."""
    resolved = resolve_extends(objects, "object")
    return {name: obj for name, obj in resolved.items() if not is_abstract(name)}
