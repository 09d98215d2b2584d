from feedview.parsing.document import FeedDocumentParser, FeedTree
from feedview.parsing.fields import ItemFieldResolver, ResolvedFields
from feedview.parsing.images import ImageExtractor
from feedview.parsing.namespaces import NamespaceMap
from feedview.parsing.normalizer import FeedNormalizer, format_display_date

__all__ = [
    "FeedDocumentParser",
    "FeedNormalizer",
    "FeedTree",
    "ImageExtractor",
    "ItemFieldResolver",
    "NamespaceMap",
    "ResolvedFields",
    "format_display_date",
]
