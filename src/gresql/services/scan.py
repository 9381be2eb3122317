from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from loguru import logger

from gresql.core.errors import UnreadableFile
from gresql.core.models import FileResult, QueryPredicate
from gresql.services.analyzer import StatementAnalyzer
from gresql.services.collector import FileCollector
from gresql.services.matcher import match_statements


class ScanService:
    """Orchestrates reading, analysis and matching of every collected file."""

    def __init__(
        self,
        analyzer: StatementAnalyzer,
        collector: FileCollector,
        workers: int = 1,
    ) -> None:
        self.analyzer = analyzer
        self.collector = collector
        self.workers = max(workers, 1)

    def scan(self, paths: list[Path], predicates: list[QueryPredicate]) -> list[FileResult]:
        """Scans each file independently; results come back in input order."""
        if not predicates:
            raise ValueError("At least one search query is required")

        logger.debug("Scanning {} file(s) with {} worker(s)", len(paths), self.workers)

        if self.workers == 1 or len(paths) < 2:
            results = [self.scan_file(path, predicates) for path in paths]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                results = list(pool.map(lambda path: self.scan_file(path, predicates), paths))

        matched = sum(1 for result in results if result.matched)
        logger.debug("{} of {} file(s) matched", matched, len(results))
        return results

    def scan_file(self, path: Path, predicates: list[QueryPredicate]) -> FileResult:
        """Runs the read -> analyze -> match pipeline for a single file."""
        try:
            source = self.collector.read(path)
        except UnreadableFile as e:
            logger.warning("{}", e)
            return FileResult(path=str(path), error=e.reason)

        statements = self.analyzer.analyze(source.content)
        logger.debug("{}: {} statement(s) recognized", source.path, len(statements))
        return match_statements(source.path, statements, predicates)
