import re

_QUOTED_PART = re.compile(r"""\[([^\]]*)\]|"([^"]*)"|`([^`]*)`""")


class VerbatimNormalizer:
    """Keeps identifiers exactly as written, apart from surrounding whitespace.

    `[dbo].[orders]` and `dbo.orders` are different tables under this normalizer.
    Implements the IIdentifierNormalizer protocol.
    """

    def normalize(self, identifier: str) -> str:
        return identifier.strip()


class UnquoteNormalizer:
    """Strips bracket, double-quote and backtick delimiters from every dotted part.

    Implements the IIdentifierNormalizer protocol.
    """

    def normalize(self, identifier: str) -> str:
        return _QUOTED_PART.sub(
            lambda m: next(group for group in m.groups() if group is not None),
            identifier.strip(),
        )
