"""Convert TOML lock file packages into pinned requirements."""
