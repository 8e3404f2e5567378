"""
Unit file analyzer.

This module defines the UnitFileAnalyzer class, the main entry point that
wires the INI scanner, the reference extractor and a collecting sink
together for single unit files, whole directories, and dependency graphs.
"""

import os
import warnings
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from unitref_analyzer.analyzer.reference_extractor import ReferenceExtractor
from unitref_analyzer.exceptions import UnitFileReadError
from unitref_analyzer.graph.dependency_graph import UnitDependencyGraph
from unitref_analyzer.models.config import ExtractorConfig
from unitref_analyzer.models.relationship import (
    DEFAULT_RELATIONSHIP_TABLE,
    RelationshipTable,
)
from unitref_analyzer.models.result import UnitAnalysisResult
from unitref_analyzer.parser.ini_scanner import IniScanner
from unitref_analyzer.parser.unit_files import is_unit_file
from unitref_analyzer.sink.collector import ReferenceCollector
from unitref_analyzer.utils.warnings import WarningCollector

PathLike = Union[str, Path]


class UnitFileAnalyzer:
    """Unit file analyzer (main entry point).

    Responsibilities:
    1. Read unit files (or accept text directly)
    2. Drive the scanner, pushing each triple into a ReferenceExtractor
    3. Collect references and scan warnings into a UnitAnalysisResult
    4. Merge results from many files into a UnitDependencyGraph

    Usage:
        analyzer = UnitFileAnalyzer(config)
        result = analyzer.analyze_file("/etc/systemd/system/sshd.service")
        graph = analyzer.build_graph(analyzer.analyze_paths(["/etc/systemd"]))
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        table: RelationshipTable = DEFAULT_RELATIONSHIP_TABLE,
    ) -> None:
        """Initialize a UnitFileAnalyzer.

        Args:
            config: ExtractorConfig for analysis configuration.
            table: Relationship lookup table shared by every extractor.
        """
        self.config = config or ExtractorConfig()
        self.table = table

    def analyze_text(
        self, text: str, path: Optional[str] = None
    ) -> UnitAnalysisResult:
        """Extract references from unit file text.

        Args:
            text: Unit file contents.
            path: Optional path recorded on the result.

        Returns:
            UnitAnalysisResult with references in file order.
        """
        collector = ReferenceCollector()
        scan_warnings = WarningCollector()
        extractor = ReferenceExtractor(collector, self.table, self.config)

        IniScanner(scan_warnings).feed(text, extractor.on_triple)

        references = [
            ref for ref in collector if self.config.keeps(ref.relationship)
        ]
        return UnitAnalysisResult(
            path=path,
            references=references,
            warnings=scan_warnings.get_all(),
        )

    def analyze_file(self, path: PathLike) -> UnitAnalysisResult:
        """Read and analyze one unit file.

        The file is analyzed regardless of its suffix; use is_unit_file()
        or analyze_paths() to filter.

        Args:
            path: Path of the unit file.

        Returns:
            UnitAnalysisResult for the file.

        Raises:
            UnitFileReadError: If the file cannot be read or decoded.
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise UnitFileReadError(
                f"Cannot read unit file '{file_path}'", str(file_path), str(e)
            ) from e

        return self.analyze_text(text, path=str(file_path))

    def analyze_paths(
        self, paths: Iterable[PathLike], force: bool = False
    ) -> List[UnitAnalysisResult]:
        """Analyze files and directories.

        Directories are walked recursively and only unit files inside them
        are analyzed. Files named explicitly without a unit suffix are
        skipped with a UserWarning unless force is True.

        Args:
            paths: Files and/or directories.
            force: Analyze explicitly named files whatever their suffix.

        Returns:
            One UnitAnalysisResult per analyzed file, in discovery order.

        Raises:
            UnitFileReadError: If a path does not exist or a file cannot
                be read.
        """
        results: List[UnitAnalysisResult] = []
        for file_path in self._discover(paths, force):
            results.append(self.analyze_file(file_path))
        return results

    def build_graph(
        self, results: Iterable[UnitAnalysisResult]
    ) -> UnitDependencyGraph:
        """Merge per-file results into one dependency graph.

        Results without a path (in-memory text) have no unit name and are
        left out.
        """
        graph = UnitDependencyGraph()
        for result in results:
            unit_name = result.unit_name
            if unit_name is None:
                continue
            graph.add_unit(unit_name, result.path)
            graph.add_references(unit_name, result.references)
        return graph

    def _discover(
        self, paths: Iterable[PathLike], force: bool
    ) -> Iterator[Path]:
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                yield from self._walk(path)
            elif path.is_file():
                if force or is_unit_file(path):
                    yield path
                else:
                    warnings.warn(
                        f"Skipping '{path}': not a unit file "
                        f"(use force=True to analyze it anyway)",
                        UserWarning,
                    )
            else:
                raise UnitFileReadError(
                    f"Path not found: '{path}'", str(path)
                )

    def _walk(self, directory: Path) -> Iterator[Path]:
        for root, dirs, files in os.walk(
            directory, followlinks=self.config.follow_symlinks
        ):
            dirs.sort()
            for name in sorted(files):
                if is_unit_file(name):
                    yield Path(root) / name
