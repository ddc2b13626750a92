"""Application context with dependency injection."""

from dataclasses import dataclass

from lockpin.core.manifest import ManifestReader, RealManifestReader


@dataclass(frozen=True)
class LockpinContext:
    """Immutable context holding all dependencies for lockpin operations.

    Created at CLI entry point. Tests pass their own instance as ``obj``
    to swap in fakes.
    """

    manifest_reader: ManifestReader


def create_context() -> LockpinContext:
    """Create production context with real implementations."""
    return LockpinContext(manifest_reader=RealManifestReader())
