"""Manifest data structures, parsing, and file access.

A manifest is a TOML document carrying a top-level ``[[package]]`` array of
tables, the layout used by lock files such as ``poetry.lock`` and
``Cargo.lock``. Only the ``name`` and ``version`` of each entry are kept.
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_KEY = "package"


@dataclass(frozen=True)
class PackageRecord:
    """One entry of the manifest's package array."""

    name: str
    version: str


@dataclass(frozen=True)
class Manifest:
    """Immutable parsed manifest.

    Packages keep the order in which they appear in the source file.
    """

    source: Path
    packages: tuple[PackageRecord, ...]


class ManifestReader(ABC):
    """Abstract interface for reading manifest files.

    Enables in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read the whole manifest as text.

        Args:
            path: Path to the manifest file

        Returns:
            File contents decoded as UTF-8

        Raises:
            OSError: If the file is missing or cannot be read
        """
        ...


class RealManifestReader(ManifestReader):
    """Production implementation that reads manifests from disk."""

    def read_text(self, path: Path) -> str:
        logger.debug("Reading manifest: %s", path)
        return path.read_text(encoding="utf-8")


def _parse_package(entry: object, index: int, source: Path) -> PackageRecord:
    if not isinstance(entry, dict):
        raise ValueError(f"Entry {index} of '{PACKAGE_KEY}' in {source} is not a table")

    for key in ("name", "version"):
        if key not in entry:
            raise ValueError(f"Missing '{key}' in entry {index} of '{PACKAGE_KEY}' in {source}")

    return PackageRecord(name=str(entry["name"]), version=str(entry["version"]))


def parse_manifest(text: str, source: Path) -> Manifest:
    """Parse manifest text into a Manifest.

    Every entry is checked before the manifest is returned, so a bad entry
    anywhere in the list fails the whole parse.

    Args:
        text: TOML document
        source: Path the text was read from (used in error messages)

    Returns:
        Manifest with packages in source order

    Raises:
        tomllib.TOMLDecodeError: If the text is not valid TOML
        ValueError: If the package array is missing or an entry lacks name/version
    """
    data = tomllib.loads(text)

    if PACKAGE_KEY not in data:
        raise ValueError(f"Missing '{PACKAGE_KEY}' in {source}")

    entries = data[PACKAGE_KEY]
    if not isinstance(entries, list):
        raise ValueError(f"Expected '{PACKAGE_KEY}' in {source} to be an array of tables")

    packages = tuple(_parse_package(entry, i, source) for i, entry in enumerate(entries))
    logger.debug("Parsed %d package(s) from %s", len(packages), source)
    return Manifest(source=source, packages=packages)


def load_manifest(reader: ManifestReader, path: Path) -> Manifest:
    """Read and parse the manifest at path."""
    return parse_manifest(reader.read_text(path), path)
