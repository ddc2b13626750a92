"""Conversion from manifest packages to pinned requirement lines."""

from pathlib import Path

from lockpin.core.manifest import (
    Manifest,
    ManifestReader,
    PackageRecord,
    RealManifestReader,
    load_manifest,
)


def pin_line(record: PackageRecord) -> str:
    """Format a package as an exact requirement, e.g. ``requests==2.31.0``."""
    return f"{record.name}=={record.version}"


def format_requirements(manifest: Manifest) -> str:
    """Join pin lines in manifest order, without a trailing newline."""
    return "\n".join(pin_line(record) for record in manifest.packages)


def convert(file_path: Path | str, reader: ManifestReader | None = None) -> str:
    """Convert the manifest at file_path into requirements text.

    Args:
        file_path: Path to the manifest file
        reader: Source of file contents; defaults to reading from disk

    Returns:
        One ``name==version`` line per package, in input order.
        Empty string when the package array is empty.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid TOML or lacks the expected keys
    """
    if reader is None:
        reader = RealManifestReader()
    manifest = load_manifest(reader, Path(file_path))
    return format_requirements(manifest)
