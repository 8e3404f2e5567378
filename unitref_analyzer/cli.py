"""
Command-line interface for unit reference analyzer v1.0.

This module provides a command-line interface for extracting unit
references from unit files and directories, with tags, JSON, table and
pretty output and dependency graph export.
"""

import argparse
import json
import sys
import warnings
from pathlib import Path
from typing import List, Optional

from colorama import Fore, Style, init
from tabulate import tabulate

from unitref_analyzer import (
    DEFAULT_RELATIONSHIP_TABLE,
    REFERENCE_KIND,
    ExtractorConfig,
    Relationship,
    UnitAnalysisResult,
    UnitFileAnalyzer,
)
from unitref_analyzer.exceptions import UnitRefError

USE_COLOR = True


def _paint(color: str, msg: str) -> str:
    if USE_COLOR:
        return f"{color}{msg}{Style.RESET_ALL}"
    return msg


def print_success(msg: str) -> None:
    """Print success message."""
    print(_paint(Fore.GREEN, f"[OK] {msg}"), file=sys.stderr)


def print_error(msg: str) -> None:
    """Print error message."""
    print(_paint(Fore.RED, f"[ERROR] {msg}"), file=sys.stderr)


def print_warning(msg: str) -> None:
    """Print warning message."""
    print(_paint(Fore.YELLOW, f"[WARN] {msg}"), file=sys.stderr)


def print_info(msg: str) -> None:
    """Print info message."""
    print(_paint(Fore.CYAN, msg), file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitref-analyzer",
        description="Unit file dependency reference extractor - v1.0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List references of one unit file
  %(prog)s /etc/systemd/system/sshd.service

  # Walk a directory, show only ordering references as a table
  %(prog)s /etc/systemd/system --relationship After --relationship Before -f table

  # Export the dependency graph
  %(prog)s /usr/lib/systemd/system --export units.json
        """,
    )

    # === Input parameters ===
    input_group = parser.add_argument_group("Input Options")
    input_group.add_argument(
        "paths", nargs="*", metavar="PATH", help="Unit files or directories"
    )
    input_group.add_argument(
        "--force",
        action="store_true",
        help="Analyze named files even without a unit file suffix",
    )
    input_group.add_argument(
        "--encoding", default="utf-8", help="File encoding (default: utf-8)"
    )
    input_group.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links while walking directories",
    )

    # === Extraction parameters ===
    extract_group = parser.add_argument_group("Extraction Options")
    extract_group.add_argument(
        "--relationship",
        "-r",
        action="append",
        choices=Relationship.values(),
        metavar="NAME",
        help="Keep only this relationship (repeatable)",
    )
    extract_group.add_argument(
        "--no-references",
        action="store_true",
        help="Disable reference extraction (nothing is emitted)",
    )
    extract_group.add_argument(
        "--list-relationships",
        action="store_true",
        help="List recognized relationship keys and exit",
    )

    # === Output parameters ===
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["tags", "json", "table", "pretty"],
        default="tags",
        help="Output format (default: tags)",
    )
    output_group.add_argument(
        "--export", "-o", metavar="FILE", help="Export dependency graph to file"
    )
    output_group.add_argument(
        "--dot",
        action="store_true",
        help="Export the graph in Graphviz DOT format instead of JSON",
    )
    output_group.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    output_group.add_argument(
        "--no-warnings", action="store_true", help="Suppress warnings"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    CLI main entry point.

    Supported commands:
        unitref-analyzer unit.service
        unitref-analyzer /etc/systemd/system --format table
        unitref-analyzer dir/ --export graph.json
        unitref-analyzer --list-relationships
    """
    global USE_COLOR

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        USE_COLOR = False
    else:
        init()

    if args.list_relationships:
        handle_list_relationships()
        return

    if not args.paths:
        parser.error("at least one PATH is required")

    try:
        config = ExtractorConfig(
            references_enabled=not args.no_references,
            encoding=args.encoding,
            relationships=frozenset(args.relationship) if args.relationship else None,
            follow_symlinks=args.follow_symlinks,
        )
        analyzer = UnitFileAnalyzer(config)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            results = analyzer.analyze_paths(args.paths, force=args.force)

        if not args.no_warnings:
            for warning in caught:
                print_warning(str(warning.message))

        print_success(f"Analyzed {len(results)} unit file(s).")

        if args.format == "json":
            handle_json(results)
        elif args.format == "table":
            handle_table(results)
        elif args.format == "pretty":
            handle_pretty(results)
        else:
            handle_tags(results)

        if args.export:
            handle_export(analyzer, results, args.export, args.dot)

        if not args.no_warnings:
            show_scan_warnings(results)

    except UnitRefError as e:
        print_error(f"Unit reference analysis failed: {e}")
        sys.exit(1)


def handle_list_relationships() -> None:
    """Handle --list-relationships command."""
    kind = REFERENCE_KIND
    print(f"Kind: {kind.letter} {kind.name} ({kind.description})")
    rows = [
        [rel.ordinal, rel.display_name, rel.description]
        for rel in DEFAULT_RELATIONSHIP_TABLE.all_relationships()
    ]
    print(tabulate(rows, headers=["Role", "Key", "Description"]))


def handle_tags(results: List[UnitAnalysisResult]) -> None:
    """Print one tab-separated line per reference."""
    for result in results:
        for ref in result.references:
            print(f"{ref.unit_name}\t{result.path}\t{ref.relationship.value}")


def handle_json(results: List[UnitAnalysisResult]) -> None:
    print(
        json.dumps(
            [result.to_dict() for result in results], indent=2, ensure_ascii=False
        )
    )


def handle_table(results: List[UnitAnalysisResult]) -> None:
    rows = [
        [result.unit_name, ref.relationship.value, ref.unit_name]
        for result in results
        for ref in result.references
    ]
    print(tabulate(rows, headers=["Unit", "Relationship", "Referenced Unit"]))


def handle_pretty(results: List[UnitAnalysisResult]) -> None:
    """Group references by file, then by relationship."""
    for result in results:
        print(_paint(Fore.CYAN, f"\n{result.path}"))
        if not result.references:
            print("  (no references)")
            continue
        for relationship in Relationship:
            refs = result.get_by_relationship(relationship)
            if refs:
                names = ", ".join(ref.unit_name for ref in refs)
                print(f"  {_paint(Fore.YELLOW, relationship.value)}: {names}")


def handle_export(
    analyzer: UnitFileAnalyzer,
    results: List[UnitAnalysisResult],
    output_file: str,
    dot: bool,
) -> None:
    """Export the dependency graph."""
    output_path = Path(output_file)
    graph = analyzer.build_graph(results)

    print_info(f"Exporting dependency graph to: {output_path}")

    if dot:
        content = graph.to_dot()
    else:
        data = graph.to_dict()
        data["statistics"] = graph.get_statistics()
        content = json.dumps(data, indent=2, ensure_ascii=False)

    try:
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise UnitRefError(f"Cannot write '{output_path}': {e}") from e
    print_success(f"Exported to {output_path}")


def show_scan_warnings(results: List[UnitAnalysisResult]) -> None:
    """Show scan warnings grouped by file."""
    for result in results:
        for warning in result.warnings:
            print_warning(f"{result.path}: {warning}")


if __name__ == "__main__":
    main()
