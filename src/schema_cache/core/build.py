import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar

from schema_cache.cache import Cache
from schema_cache.core.classes import BASE_EVENT, enrich_classes, stamp_source
from schema_cache.core.dictionary import update_dictionary, update_objects
from schema_cache.core.extends import resolve_extends
from schema_cache.core.include import IncludeResolver
from schema_cache.core.loader import DEFAULT_EXTENSIONS_DIR, DescriptorLoader, parse_model
from schema_cache.core.merge import JObject
from schema_cache.core.objects import resolve_objects
from schema_cache.core.ports.source import DescriptorSource
from schema_cache.core.see_also import link_see_also
from schema_cache.models import ClassDescriptor, Descriptor, ObjectDescriptor

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Descriptor)


def parse_descriptors(
    model: type[D], raw: Mapping[str, JObject], includes: IncludeResolver
) -> dict[str, D]:
    """Expand includes, validate, and stamp attribute provenance for one descriptor kind."""
    descriptors: dict[str, D] = {}
    for name, data in raw.items():
        descriptor = parse_model(model, includes.resolve(name, data), name)
        descriptors[name] = descriptor.model_copy(update={"attributes": stamp_source(descriptor.attributes, name)})
    return descriptors


def build_cache(
    source: DescriptorSource,
    home: str | Path,
    extensions_dir: str = DEFAULT_EXTENSIONS_DIR,
) -> Cache:
    """Load every descriptor below ``home`` and resolve them into a ``Cache``.

    Raises a ``SchemaError`` subclass when the descriptor tree is structurally
    invalid; no partial cache is ever returned.
    """
    loader = DescriptorLoader(source, home, extensions_dir)
    logger.info("loading schema: %s", loader.home)

    version = loader.read_version()
    logger.info("schema version: %s", version.version)

    categories = loader.read_categories()
    dictionary = loader.read_dictionary()
    includes = IncludeResolver(loader)

    all_classes = link_see_also(parse_descriptors(ClassDescriptor, loader.read_class_descriptors(), includes))
    common = all_classes.get(BASE_EVENT)
    classes = enrich_classes(resolve_extends(all_classes, "class"), categories.attributes)

    objects = resolve_objects(parse_descriptors(ObjectDescriptor, loader.read_object_descriptors(), includes))

    dictionary = update_dictionary(dictionary, common, classes, objects)
    objects = update_objects(dictionary, objects)

    logger.info(
        "schema loaded: %d categories, %d classes, %d objects, %d dictionary attributes",
        len(categories.attributes),
        len(classes),
        len(objects),
        len(dictionary.attributes),
    )
    return Cache(version, dictionary, categories, common, classes, objects)


def load_cache(home: str | Path, extensions_dir: str = DEFAULT_EXTENSIONS_DIR) -> Cache:
    from schema_cache.sources.filesystem import FileSystemSource

    return build_cache(FileSystemSource(), home, extensions_dir)
