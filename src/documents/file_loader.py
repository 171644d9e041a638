"""Concrete loader for local YAML / JSON files holding WorkloadEndpoint documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, List

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from src.conversion.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read every document of a file from disk as a Python `dict`."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @staticmethod
    def load(path: str | Path) -> List[Dict[str, Any]]:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("File not found: %s", file_path)
            raise DocumentLoadError(f"File not found: {file_path}", str(file_path))

        if file_path.suffix.lower() not in FileLoader.supported_exts:
            raise DocumentLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(FileLoader.supported_exts))}",
                str(file_path),
            )

        # read + parse
        try:
            raw_text = file_path.read_text(encoding="utf-8")
            if file_path.suffix.lower() in _YAML_EXTS:
                documents = [
                    d for d in _yaml_parser.load_all(raw_text) if d is not None
                ]
            else:  # .json
                data = json.loads(raw_text)
                documents = data if isinstance(data, list) else [data]
        except (UnicodeDecodeError, YAMLError, json.JSONDecodeError) as exc:
            raise DocumentLoadError(
                f"Cannot parse {file_path.name}: {exc}", str(file_path)
            ) from exc

        for index, document in enumerate(documents):
            if not isinstance(document, dict):
                raise DocumentLoadError(
                    f"Document #{index} of {file_path.name} must be a mapping",
                    str(file_path),
                )

        logger.debug("Loaded %d document(s) from %s", len(documents), file_path)
        return documents
