"""
JAX-RS Lens CLI - Command Line Interface

This module provides the command-line interface for JAX-RS Lens.
"""

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List, Optional

from loguru import logger

from jaxrs_lens import __version__
from jaxrs_lens.analyzers.analyzer_factory import AnalyzerFactory
from jaxrs_lens.config.config import configs
from jaxrs_lens.labels.project_label_registry import ProjectLabelRegistry
from jaxrs_lens.lens.codelens_provider import JaxRsCodeLensProvider
from jaxrs_lens.models.domain_models import EndpointDescriptor


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure loguru sinks for the application.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Optional file receiving the same records
    """
    level = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}")
    if log_file:
        logger.add(log_file, level=level, encoding="utf-8")


def validate_environment() -> bool:
    """Validate the local server configuration."""
    try:
        configs.validate_server_config()
    except ValueError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        print("\nPlease check SERVER_HOST and SERVER_PORT in your .env file or environment.", file=sys.stderr)
        return False
    return True


def _resolve_project_path(raw_path: str) -> Optional[Path]:
    project_path = Path(raw_path)
    if not project_path.exists():
        logger.error(f"Project path does not exist: {project_path}")
        return None
    if not project_path.is_dir():
        logger.error(f"Project path is not a directory: {project_path}")
        return None
    return project_path


def _format_endpoint(descriptor: EndpointDescriptor, root: Path) -> str:
    method = descriptor.method
    file_path = Path(method.unit.file_path)
    try:
        file_path = file_path.relative_to(root)
    except ValueError:
        pass
    position = descriptor.anchor_position
    marker = "*" if descriptor.is_primary else " "
    verb = descriptor.http_method.value if descriptor.http_method else "?"
    # positions are zero-based, editors count from one
    return f"{marker} {verb:<6} {descriptor.resolved_url}  {file_path}:{position.line + 1}:{position.character + 1}"


def scan_command(args: argparse.Namespace) -> int:
    """
    Execute the scan command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    setup_logging(args.verbose, configs.LOG_FILE)
    start_time = time.perf_counter()

    if not args.base_url and not validate_environment():
        return 1

    project_path = _resolve_project_path(args.project_path)
    if project_path is None:
        return 1

    analyzer = AnalyzerFactory.create_analyzer(args.language)
    project = analyzer.analyze_project(project_path)

    base_url = args.base_url or configs.base_url_for(args.port)
    provider = JaxRsCodeLensProvider()
    endpoints = provider.collect_project_endpoints(project, base_url)

    if args.format == "json":
        output = json.dumps([endpoint.to_dict() for endpoint in endpoints], indent=2, ensure_ascii=False)
    else:
        output = "\n".join(_format_endpoint(endpoint, project_path) for endpoint in endpoints)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n", encoding="utf-8")
        logger.info(f"Exported {len(endpoints)} endpoints to: {output_path}")
    elif output:
        print(output)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Scan completed in {elapsed:.2f}s")
    return 0


def labels_command(args: argparse.Namespace) -> int:
    """Print the labels of the project, one per line."""
    setup_logging(args.verbose, configs.LOG_FILE)

    project_path = _resolve_project_path(args.project_path)
    if project_path is None:
        return 1

    analyzer = AnalyzerFactory.create_analyzer(args.language)
    project = analyzer.analyze_project(project_path)
    for label in ProjectLabelRegistry.get_instance().get_project_labels(project):
        print(label)
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        'project_path',
        type=str,
        help='Path to the project to analyze'
    )

    parser.add_argument(
        '--language', '-l',
        type=str,
        default='java',
        choices=['java'],
        help='Programming language of the project (default: java)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (DEBUG) logging'
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='jaxrs-lens',
        description='JAX-RS Lens - discover JAX-RS/Jakarta REST endpoints and their URLs'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'JAX-RS Lens {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Scan command
    scan_parser = subparsers.add_parser(
        'scan',
        help='List the REST endpoints of a project'
    )
    _add_common_arguments(scan_parser)

    target = scan_parser.add_mutually_exclusive_group()
    target.add_argument(
        '--base-url',
        type=str,
        help='Base URL of the running server (default: built from SERVER_HOST/SERVER_PORT)'
    )
    target.add_argument(
        '--port', '-p',
        type=int,
        help='Port of the local server (default: SERVER_PORT)'
    )

    scan_parser.add_argument(
        '--format', '-f',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)'
    )

    scan_parser.add_argument(
        '--output', '-o',
        type=str,
        help='Write the result to this file instead of stdout'
    )

    scan_parser.set_defaults(func=scan_command)

    # Labels command
    labels_parser = subparsers.add_parser(
        'labels',
        help='Print the labels of a project (e.g. jaxrs, jakarta)'
    )
    _add_common_arguments(labels_parser)
    labels_parser.set_defaults(func=labels_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
