from loguru import logger

from gresql.core.models import Statement
from gresql.core.ports import ISegmenter
from gresql.infrastructure.parsing.classifier import classify
from gresql.infrastructure.parsing.extractor import TableExtractor
from gresql.infrastructure.parsing.lexer import tokenize


class StatementAnalyzer:
    """Turns file text into classified statements with their target tables."""

    def __init__(self, segmenter: ISegmenter, extractor: TableExtractor) -> None:
        self.segmenter = segmenter
        self.extractor = extractor

    def analyze(self, text: str) -> list[Statement]:
        """Segments, classifies and extracts; unrecognized spans are dropped."""
        statements: list[Statement] = []
        for span in self.segmenter.segment(text):
            tokens = tokenize(span.code)
            statement_type = classify(tokens)
            if statement_type is None:
                logger.trace("Skipping unrecognized span at line {}", span.start_line)
                continue

            tables = self.extractor.extract(statement_type, tokens)
            if not tables:
                logger.debug(
                    "No target table resolved for {} at line {}",
                    statement_type.value,
                    span.start_line,
                )

            statements.append(
                Statement(
                    statement_type=statement_type,
                    tables=tables,
                    text=span.text,
                    start_line=span.start_line,
                    end_line=span.end_line,
                )
            )
        return statements
