"""YAML report writer for match collections."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import yaml

from .errors import ReportWriteError
from .expansion.records import MatchCollection

logger = logging.getLogger(__name__)


def render_matches(collection: MatchCollection, include_labels: bool = True) -> str:
    """Render the collection as a ``matches:`` YAML document."""
    return yaml.safe_dump(
        collection.to_dict(include_labels=include_labels),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def _new_file_mode() -> int:
    """Mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_matches(
    collection: MatchCollection,
    path: Path | str = "packages.yml",
    include_labels: bool = True,
) -> Path:
    """Write the collection to ``path``, replacing any existing file.

    The document is written to a temporary file in the target directory and
    renamed into place, so a failed write never leaves a partial file. The
    file gets the umask-default mode, as a plainly created file would.

    Raises:
        ReportWriteError: If the file cannot be written
    """
    path = Path(path)
    text = render_matches(collection, include_labels=include_labels)

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.chmod(tmp_name, _new_file_mode())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ReportWriteError(f"Couldn't write {path}: {e}") from e

    logger.info("Wrote %d matches to %s", len(collection), path)
    return path
