"""Load and save the JSON/YAML documents the action works on.

Every loader returns a LoadedDocument instead of raising, so callers decide
for themselves what "absent" and "malformed" mean for their input. Only the
manifest treats those states as fatal.
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from pnpm_overrides.utils.helpers import save_json_file
from pnpm_overrides.utils.logging import logger


class DocumentState(Enum):
    """Outcome of reading a document from disk."""

    ABSENT = "absent"
    MALFORMED = "malformed"
    PRESENT = "present"


@dataclass(frozen=True)
class LoadedDocument:
    """A parsed document plus how the read went.

    Attributes:
        path: File the document was read from
        state: ABSENT, MALFORMED or PRESENT
        data: Parsed content (None unless PRESENT)
        error: Parser or OS error message for MALFORMED documents
    """

    path: Path
    state: DocumentState
    data: Any = None
    error: str | None = None

    @property
    def is_present(self) -> bool:
        return self.state is DocumentState.PRESENT

    @property
    def is_mapping(self) -> bool:
        """True when the document parsed to a key/value mapping."""
        return self.is_present and isinstance(self.data, dict)

    def mapping(self) -> dict[str, Any]:
        """Return the document as a dict, or an empty dict for anything else."""
        return self.data if self.is_mapping else {}


def _read_text(path: Path) -> str | None:
    if not path.is_file():
        return None
    with open(path, encoding="utf-8") as f:
        return f.read()


def load_json_document(path: Path | str) -> LoadedDocument:
    """Read a JSON document, keeping object key order."""
    path = Path(path)
    try:
        text = _read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return LoadedDocument(path, DocumentState.MALFORMED, error=str(e))

    if text is None:
        return LoadedDocument(path, DocumentState.ABSENT)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Invalid JSON in {path}: {e}")
        return LoadedDocument(path, DocumentState.MALFORMED, error=str(e))

    return LoadedDocument(path, DocumentState.PRESENT, data=data)


def load_yaml_document(path: Path | str) -> LoadedDocument:
    """Read a YAML document with the safe loader."""
    path = Path(path)
    try:
        text = _read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return LoadedDocument(path, DocumentState.MALFORMED, error=str(e))

    if text is None:
        return LoadedDocument(path, DocumentState.ABSENT)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug(f"Invalid YAML in {path}: {e}")
        return LoadedDocument(path, DocumentState.MALFORMED, error=str(e))

    return LoadedDocument(path, DocumentState.PRESENT, data=data)


def save_json_document(data: Any, path: Path | str) -> None:
    """Write JSON with 2-space indentation and a trailing newline."""
    save_json_file(data, path)


def dump_yaml(data: Any) -> str:
    """Serialize to block-style YAML without reordering keys."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def save_yaml_document(data: Any, path: Path | str) -> None:
    """Write YAML in block style, keeping key order."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_yaml(data))
