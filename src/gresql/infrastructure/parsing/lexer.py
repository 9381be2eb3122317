"""Comment masking and tokenization of T-SQL style statement text.

The lexer is intentionally shallow: it knows about string literals, quoted
identifiers and comments so that keywords inside them are never mistaken for
clause keywords, and it records how deeply each token is nested in
parentheses so callers can stay at a statement's top level.
"""

import re
from typing import NamedTuple

# Strings and quoted identifiers are matched first so a '--' inside them is not a comment.
_COMMENT_PATTERN = re.compile(
    r"""
    '(?:[^']|'')*'
    | "[^"\n]*"
    | \[[^\]\n]*\]
    | (?P<line>--[^\n]*)
    | (?P<block>/\*)
    """,
    re.VERBOSE,
)

_BLOCK_DELIMITER = re.compile(r"/\*|\*/")

# One part of a possibly dotted identifier: [bracketed], "quoted", `ticked` or bare.
_PART = r"""(?:\[[^\]\n]*\]|"[^"\n]*"|`[^`\n]*`|[\w@#$]+)"""

_TOKEN_PATTERN = re.compile(
    rf"""
    (?P<string>N?'(?:[^']|'')*'?)
    | (?P<identifier>{_PART}(?:\.{{1,2}}{_PART})*)
    | (?P<symbol>[^\s\w])
    """,
    re.VERBOSE,
)


class Token(NamedTuple):
    text: str
    kind: str  # "identifier", "string" or "symbol"
    depth: int  # Parenthesis nesting level; parentheses carry their outer level

    @property
    def keyword(self) -> str:
        """Upper-cased text, for case-insensitive keyword comparison."""
        return self.text.upper()

    @property
    def is_identifier(self) -> bool:
        return self.kind == "identifier"


def mask_comments(text: str) -> str:
    """Replaces every comment character except line breaks with a space.

    The result has the same length and line structure as the input. Block
    comments nest; an unterminated one runs to the end of the text.
    """
    pieces: list[str] = []
    copied = position = 0
    while match := _COMMENT_PATTERN.search(text, position):
        if match.lastgroup == "line":
            end = match.end()
        elif match.lastgroup == "block":
            end = _block_comment_end(text, match.start())
        else:
            position = match.end()
            continue
        pieces.append(text[copied : match.start()])
        pieces.append(re.sub(r"[^\n]", " ", text[match.start() : end]))
        copied = position = end
    pieces.append(text[copied:])
    return "".join(pieces)


def _block_comment_end(text: str, start: int) -> int:
    """Returns the index just past the '*/' closing the block comment opened at start."""
    depth = 0
    for delimiter in _BLOCK_DELIMITER.finditer(text, start):
        depth += 1 if delimiter.group(0) == "/*" else -1
        if depth == 0:
            return delimiter.end()
    return len(text)


def tokenize(code: str) -> list[Token]:
    """Splits comment-free statement text into tokens with their nesting depth."""
    tokens: list[Token] = []
    depth = 0
    for match in _TOKEN_PATTERN.finditer(code):
        kind = match.lastgroup or "symbol"
        text = match.group(0)
        if text == ")":
            depth = max(depth - 1, 0)
        tokens.append(Token(text, kind, depth))
        if text == "(":
            depth += 1
    return tokens


def top_level(tokens: list[Token]) -> list[Token]:
    """Returns only the tokens outside any parentheses.

    A parenthesized group collapses to its adjacent '(' and ')' tokens.
    """
    return [token for token in tokens if token.depth == 0]
