"""Shared helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Optional


def compute_sha256(path: Path) -> str:
    """Return the SHA-256 checksum for a file."""

    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def has_classifier(classifier: Optional[str]) -> bool:
    """Return True when the classifier holds something other than whitespace."""

    return classifier is not None and len(classifier.strip()) > 0
