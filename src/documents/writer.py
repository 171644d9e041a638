"""Serialize converted WorkloadEndpoint models as a multi-document YAML stream."""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO
from pathlib import Path
from typing import TextIO

from ruamel.yaml import YAML

from src.models.base_resource import ResourceBase


class DocumentWriter:
    """Write records as YAML documents, one per resource."""

    def __init__(self) -> None:
        self._yaml = YAML()
        self._configure_yaml()

    def _configure_yaml(self) -> None:
        """Configure YAML for readable output"""
        self._yaml.indent(mapping=2, sequence=4, offset=2)
        self._yaml.default_flow_style = False
        self._yaml.allow_unicode = True
        self._yaml.width = 4096
        self._yaml.explicit_start = True

    def dump(self, resources: Iterable[ResourceBase], stream: TextIO) -> None:
        """Write every resource to ``stream``."""
        self._yaml.dump_all([r.to_document() for r in resources], stream)

    def to_yaml(self, resources: Iterable[ResourceBase]) -> str:
        """Return the YAML text for ``resources``."""
        stream = StringIO()
        self.dump(resources, stream)
        return stream.getvalue()

    def save(self, resources: Iterable[ResourceBase], file_path: Path) -> None:
        """Write ``resources`` to ``file_path``, creating parent directories."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            self.dump(resources, f)
