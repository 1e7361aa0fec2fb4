import logging
from collections.abc import Mapping
from typing import TypeVar

from schema_cache.core.errors import ExtendsCycleError, UndefinedExtendsError
from schema_cache.core.merge import deep_merge
from schema_cache.models import Descriptor

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Descriptor)


def merge_extended(base: D, child: D) -> D:
    """Flatten ``child`` over its already-resolved ``base``.

    Top-level fields are merged shallowly with the child winning; attribute
    maps are deep-merged. The ``extends`` reference is dropped.
    """
    data = base.model_dump(exclude_none=True)
    data.update(child.model_dump(exclude_none=True, exclude={"attributes"}))
    data["attributes"] = deep_merge(base.attributes, child.attributes)
    data.pop("extends", None)
    return type(child).model_validate(data)


def resolve_extends(descriptors: Mapping[str, D], kind: str) -> dict[str, D]:
    """Resolve every ``extends`` chain in ``descriptors``.

    Raises ``UndefinedExtendsError`` for a reference to an unknown name and
    ``ExtendsCycleError`` when a chain loops back on itself.
    """
    resolved: dict[str, D] = {}
    for name in descriptors:
        _resolve(name, descriptors, resolved, [], kind)
    return resolved


def _resolve(name: str, descriptors: Mapping[str, D], resolved: dict[str, D], chain: list[str], kind: str) -> D:
    done = resolved.get(name)
    if done is not None:
        return done

    if name in chain:
        raise ExtendsCycleError(kind, [*chain[chain.index(name) :], name])

    descriptor = descriptors[name]
    parent = descriptor.extends
    if parent is None:
        resolved[name] = descriptor
        return descriptor

    if parent not in descriptors:
        raise UndefinedExtendsError(kind, name, parent)

    logger.info("%s extends: %s", name, parent)
    base = _resolve(parent, descriptors, resolved, [*chain, name], kind)
    result = merge_extended(base, descriptor)
    resolved[name] = result
    return result
