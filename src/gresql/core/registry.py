from gresql.core.ports import IIdentifierNormalizer, ISegmenter
from gresql.infrastructure.parsing.normalizers import UnquoteNormalizer, VerbatimNormalizer
from gresql.infrastructure.segmenting.blank_line import BlankLineSegmenter


class ComponentRegistry:
    """Registry pattern to dynamically map string names to class implementations."""

    _segmenters: dict[str, type[ISegmenter]] = {
        "blank-line": BlankLineSegmenter,
    }

    _normalizers: dict[str, type[IIdentifierNormalizer]] = {
        "none": VerbatimNormalizer,
        "strip": UnquoteNormalizer,
    }

    @classmethod
    def get_segmenter(cls, name: str) -> type[ISegmenter]:
        if name not in cls._segmenters:
            raise ValueError(f"Unknown segmenter type: '{name}'")
        return cls._segmenters[name]

    @classmethod
    def get_normalizer(cls, name: str) -> type[IIdentifierNormalizer]:
        if name not in cls._normalizers:
            raise ValueError(f"Unknown identifier normalizer: '{name}'")
        return cls._normalizers[name]
