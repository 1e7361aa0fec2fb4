import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from schema_cache.core.errors import DescriptorDecodeError, DirectoryAccessError
from schema_cache.core.merge import JObject, deep_merge
from schema_cache.core.ports.source import DescriptorSource
from schema_cache.models import Categories, Dictionary, SchemaVersion

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIX = ".json"
VERSION_FILE = "version.json"
CATEGORIES_FILE = "categories.json"
DICTIONARY_FILE = "dictionary.json"
EVENTS_DIR = "events"
OBJECTS_DIR = "objects"
DEFAULT_EXTENSIONS_DIR = "extensions"
DEFAULT_VERSION = "0.0.0"

M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], data: JObject, source: str | Path) -> M:
    """Validate decoded descriptor data into ``model``, failing as a decode error."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise DescriptorDecodeError(source, str(exc)) from exc


def select_descriptor_files(files: list[Path]) -> list[Path]:
    return [p for p in files if p.suffix == SCHEMA_FILE_SUFFIX]


def in_directory(directory: str) -> Callable[[Path], bool]:
    """Match extension-relative paths lying anywhere below a directory named ``directory``."""
    return lambda rel: directory in rel.parts[:-1]


def named(file_name: str) -> Callable[[Path], bool]:
    return lambda rel: rel.name == file_name


class DescriptorLoader:
    """Discover and decode descriptor files below a schema home directory.

    Files in the extensions subtree are deep-merged over the base files, so an
    extension value wins wherever both define the same key.
    """

    def __init__(
        self,
        source: DescriptorSource,
        home: str | Path,
        extensions_dir: str = DEFAULT_EXTENSIONS_DIR,
    ) -> None:
        self.source = source
        self.home = Path(home)
        self.extensions_path = self.home / extensions_dir

    def read_json(self, path: Path) -> JObject:
        try:
            text = self.source.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise DescriptorDecodeError(path, str(exc)) from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("invalid JSON file: %s. Error: %s", path, exc)
            raise DescriptorDecodeError(path, str(exc)) from exc

        if not isinstance(data, dict):
            raise DescriptorDecodeError(path, "expected a JSON object")
        return data

    def read_version(self) -> SchemaVersion:
        path = self.home / VERSION_FILE
        if not self.source.is_file(path):
            logger.warning("version file %s not found", path)
            return SchemaVersion(version=DEFAULT_VERSION)
        return parse_model(SchemaVersion, self.read_json(path), path)

    def read_categories(self) -> Categories:
        data = self._read_with_extensions(CATEGORIES_FILE)
        return parse_model(Categories, data, self.home / CATEGORIES_FILE)

    def read_dictionary(self) -> Dictionary:
        data = self._read_with_extensions(DICTIONARY_FILE)
        return parse_model(Dictionary, data, self.home / DICTIONARY_FILE)

    def read_class_descriptors(self) -> dict[str, JObject]:
        return self._read_descriptors(EVENTS_DIR)

    def read_object_descriptors(self) -> dict[str, JObject]:
        return self._read_descriptors(OBJECTS_DIR)

    def _read_with_extensions(self, file_name: str) -> JObject:
        data = self.read_json(self.home / file_name)
        for path in self._extension_files(named(file_name)):
            logger.info("reading extension: %s", path)
            data = deep_merge(data, self.read_json(path))
        return data

    def _read_descriptors(self, directory: str) -> dict[str, JObject]:
        descriptors: dict[str, JObject] = {}
        for path in self._files(self.home / directory):
            self._merge_descriptor(descriptors, path)

        for path in self._extension_files(in_directory(directory)):
            logger.info("reading extension: %s", path)
            self._merge_descriptor(descriptors, path)

        logger.debug("read %d descriptor(s) from %s", len(descriptors), directory)
        return descriptors

    def _merge_descriptor(self, descriptors: dict[str, JObject], path: Path) -> None:
        data = self.read_json(path)
        name = data.get("type")
        if not isinstance(name, str) or not name:
            raise DescriptorDecodeError(path, "missing or invalid 'type' field")

        existing = descriptors.get(name)
        descriptors[name] = data if existing is None else deep_merge(existing, data)

    def _files(self, directory: Path) -> list[Path]:
        if not self.source.is_dir(directory):
            return []

        result = self.source.walk(directory)
        if not result.ok:
            for error in result.errors:
                logger.warning("unable to access %s directory. Error: %s", directory, error)
            raise DirectoryAccessError(directory, result.errors)
        return select_descriptor_files(result.files)

    def _extension_files(self, predicate: Callable[[Path], bool]) -> list[Path]:
        return [p for p in self._files(self.extensions_path) if predicate(p.relative_to(self.extensions_path))]
