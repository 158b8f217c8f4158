import logging
import threading
from typing import Callable, Dict, List

from postpages.schemas.post import PostRecord

logger = logging.getLogger(__name__)


class SeriesPostCache:
    """
    Per-build memo of the full post collection, keyed by language.

    Owned by the build orchestrator, which calls ``reset()`` at the start of
    every build so nothing leaks between builds.
    """

    def __init__(self):
        self._posts: Dict[str, List[PostRecord]] = {}
        self._lock = threading.Lock()

    def get(
        self, lang: str, loader: Callable[[str], List[PostRecord]]
    ) -> List[PostRecord]:
        with self._lock:
            if lang not in self._posts:
                posts = list(loader(lang))
                self._posts[lang] = posts
                logger.debug(f"Cached {len(posts)} posts for '{lang}'")
            return self._posts[lang]

    def invalidate(self, lang: str) -> None:
        with self._lock:
            self._posts.pop(lang, None)

    def reset(self) -> None:
        with self._lock:
            self._posts.clear()

    def __contains__(self, lang: str) -> bool:
        return lang in self._posts
