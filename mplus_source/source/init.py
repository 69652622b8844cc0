from requests import Session

from mplus_source.config import SourceSettings, load_settings
from mplus_source.constants import EXTENSION_ID
from .api import APILoaderMixin
from .chapters import ChapterListMixin
from .decryption import DecryptionMixin
from .pages import PagesMixin
from .search import SearchMixin


class MangaPlusSource(APILoaderMixin, SearchMixin, ChapterListMixin, PagesMixin, DecryptionMixin):
    """
    MANGA Plus content source. Composes title search, chapter listing, page
    resolution and page decryption via mixins over one HTTP session.
    """

    identifier = EXTENSION_ID

    def __init__(self, settings: SourceSettings | None = None, session=None):
        self.settings = settings or load_settings()
        self.session = session if session is not None else Session()
        self.session.headers.update(
            {
                "User-Agent": self.settings.user_agent,
                "Origin": "https://mangaplus.shueisha.co.jp",
                "Referer": "https://mangaplus.shueisha.co.jp/",
            }
        )
