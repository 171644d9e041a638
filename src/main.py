"""
Command-line interface for upgrading v1 WorkloadEndpoint documents to v3.

This module reads v1 API or v1 backend WorkloadEndpoint documents from a
YAML/JSON file, converts them and writes the result as YAML.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from src.conversion import WorkloadEndpointConverter
from src.conversion.exceptions import (
    ConversionError,
    DocumentLoadError,
    MalformedIdentifierError,
    ValidationError,
)
from src.documents import DocumentWriter, FileLoader, read_document
from src.models.base_resource import ResourceBase
from src.models.v1 import WorkloadEndpointV1

TARGET_V3 = "v3"
TARGET_BACKEND = "backend"


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable verbose logging from the converters if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.INFO
        format_str = "%(levelname)s: %(message)s"

    # stdout may carry the converted YAML, so logs go to stderr.
    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )

    if not verbose and not debug:
        # Quiet mode: only warnings from the libraries, INFO from the CLI
        logging.getLogger().setLevel(logging.WARNING)
        logging.getLogger(__name__).setLevel(logging.INFO)


def validate_inputs(source: Path, output_file: Path | None) -> None:
    """Validate command line inputs.

    Args:
        source: Input file path to validate.
        output_file: Output file path to validate, if any.

    Raises:
        ValidationError: If inputs are invalid.
    """
    if not source.exists():
        raise ValidationError(
            f"Source file does not exist: {source}", field_name="source"
        )

    if not source.is_file():
        raise ValidationError(
            f"Source path is not a file: {source}", field_name="source"
        )

    if output_file is None:
        return

    if output_file.suffix.lower() not in {".yaml", ".yml"}:
        raise ValidationError(
            f"Output file must have .yaml or .yml extension, got: {output_file.suffix}",
            field_name="output_file",
            actual_value=output_file,
        )


def convert_documents(source: Path, target: str = TARGET_V3) -> list[ResourceBase]:
    """Load every document in ``source`` and convert it towards ``target``.

    v1 API documents go through the backend form; backend documents are
    converted to v3 directly (or passed through when ``target`` is backend).

    Raises:
        DocumentLoadError: If the file or a document cannot be read.
        MalformedIdentifierError: If a record holds an undecodable workload id.
    """
    logger = logging.getLogger(__name__)
    converter = WorkloadEndpointConverter()
    results: list[ResourceBase] = []

    for document in FileLoader.load(source):
        record = read_document(document)
        if isinstance(record, WorkloadEndpointV1):
            record = converter.to_backend(record)
        if target == TARGET_V3:
            record = converter.to_modern_api(record)
        results.append(record)

    logger.info("Converted %d WorkloadEndpoint(s) from %s", len(results), source)
    return results


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Upgrade v1 WorkloadEndpoint documents to the v3 data model.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s endpoints.yaml
  %(prog)s endpoints.yaml -o upgraded.yaml
  %(prog)s endpoints.json --to backend --verbose
        """,
    )

    parser.add_argument(
        "source",
        type=Path,
        help="YAML or JSON file holding v1 API or v1 backend WorkloadEndpoints",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output YAML file (default: standard output)",
    )
    parser.add_argument(
        "--to",
        choices=[TARGET_V3, TARGET_BACKEND],
        default=TARGET_V3,
        help="Target representation (default: v3)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def run_upgrade(
    source: Path,
    output_file: Path | None = None,
    target: str = TARGET_V3,
    debug: bool = False,
    verbose: bool = False,
) -> NoReturn:
    """Execute the upgrade of every document in ``source``.

    Raises:
        SystemExit: Always exits with appropriate code (0 for success, >0 for errors).
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        validate_inputs(source, output_file)
        resources = convert_documents(source, target)

        writer = DocumentWriter()
        if output_file is None:
            writer.dump(resources, sys.stdout)
        else:
            writer.save(resources, output_file)
            logger.info("Upgraded documents saved to: %s", output_file)

        sys.exit(0)

    except ValidationError as e:
        logger.error("Input validation failed: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        sys.exit(1)
    except DocumentLoadError as e:
        logger.error("Document load error: %s", e)
        sys.exit(2)
    except MalformedIdentifierError as e:
        logger.error("Malformed identifier: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        sys.exit(3)
    except ConversionError as e:
        logger.error("Conversion error: %s", e)
        sys.exit(4)
    except OSError as e:
        logger.error("File system error: %s", e)
        sys.exit(8)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        if debug:
            logger.exception("Full traceback:")
        sys.exit(9)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_upgrade(args.source, args.output, args.to, args.debug, args.verbose)


if __name__ == "__main__":
    main()
