"""
Document I/O for the upgrade command line.

Loads WorkloadEndpoint documents from YAML/JSON files and writes converted
records back out as YAML. The conversion core never imports this package.
"""

from .file_loader import FileLoader
from .reader import read_document
from .writer import DocumentWriter

__all__ = ["DocumentWriter", "FileLoader", "read_document"]
