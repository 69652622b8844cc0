from enum import Enum

# Identifies this adapter to the host application's source registry.
EXTENSION_ID = "641c55ca-ff9b-4279-9278-fd304aba6aad"

PAGE_DATA_VERSION = "1.0.0"
CHAPTER_DATA_VERSION = "2.0.0"

TITLE_INDEX_PATH = "title_list/allV2"
TITLE_DETAIL_PATH = "title_detailV2"
MANGA_VIEWER_PATH = "manga_viewer"

# Sub-lists of a chapter group, in concatenation order.
CHAPTER_LIST_KEYS = ("firstChapterList", "midChapterList", "lastChapterList")


class ImageQuality(Enum):
    """Represents the image tiers served by the manga viewer endpoint."""
    HIGH = "high"
    LOW = "low"
