from gresql.core.models import Span
from gresql.infrastructure.parsing.lexer import mask_comments


class BlankLineSegmenter:
    """
    Splits file text into statement spans at blank lines.
    A line holding only whitespace ends the current span; semicolons are ignored.
    A statement containing a blank line therefore comes out as two spans.
    Implements the ISegmenter protocol.
    """

    def segment(self, text: str) -> list[Span]:
        """Returns the spans of the text that hold any code outside comments."""
        raw_lines = text.split("\n")
        # Comments are masked over the whole text so block comments may cross blank lines.
        code_lines = mask_comments(text).split("\n")

        spans: list[Span] = []
        start: int | None = None
        for index, line in enumerate(raw_lines + [""]):
            if line.strip():
                if start is None:
                    start = index
                continue
            if start is not None:
                span = self._build_span(raw_lines, code_lines, start, index)
                if span is not None:
                    spans.append(span)
                start = None

        return spans

    def _build_span(
        self, raw_lines: list[str], code_lines: list[str], start: int, end: int
    ) -> Span | None:
        """Creates the span for lines [start, end), or None when it is only comments."""
        code = "\n".join(code_lines[start:end])
        if not code.strip():
            return None

        return Span(
            text="\n".join(line.rstrip("\r") for line in raw_lines[start:end]),
            code=code,
            start_line=start + 1,
            end_line=end,
        )
