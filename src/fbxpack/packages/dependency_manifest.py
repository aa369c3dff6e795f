"""Reads the dependency list from a vcpkg manifest."""

import json
from pathlib import Path
from typing import List

from ..errors import PipelineError


class ManifestError(PipelineError):
    """Raised when vcpkg.json is missing or malformed."""

    pass


def read_dependencies(manifest_path: Path) -> List[str]:
    """Return the dependency names declared in a vcpkg manifest.

    Entries may be plain port names or objects with a ``name`` key.

    Raises:
        ManifestError: If the manifest cannot be read or has no usable list
    """
    try:
        manifest = json.loads(Path(manifest_path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ManifestError(f"Dependency manifest not found: {manifest_path}")
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {manifest_path}: {e}")

    dependencies = manifest.get("dependencies", []) if isinstance(manifest, dict) else None
    if not isinstance(dependencies, list):
        raise ManifestError(f"'dependencies' must be a list in {manifest_path}")

    names = []
    for entry in dependencies:
        if isinstance(entry, str):
            names.append(entry)
        elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
            names.append(entry["name"])
        else:
            raise ManifestError(f"Unrecognized dependency entry {entry!r} in {manifest_path}")
    return names
