import datetime
import json
import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Set

from postpages.schemas.page import BuildManifest, PagePath, PostPage
from postpages.schemas.post import PostRecord
from postpages.services.series_cache import SeriesPostCache
from postpages.services.series_resolver import resolve_series
from postpages.services.suggestion_selector import select_suggestions
from postpages.settings import Settings, settings

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"


class PageBuilder:
    """Builds the JSON payload of every post page, for every language."""

    def __init__(
        self,
        posts_service,
        cache: Optional[SeriesPostCache] = None,
        config: Optional[Settings] = None,
    ):
        self.posts_service = posts_service
        self.cache = cache or SeriesPostCache()
        self.config = config or settings

    def posts_for(self, lang: str) -> List[PostRecord]:
        return self.cache.get(lang, self.posts_service.list_posts)

    def get_static_paths(self) -> List[PagePath]:
        return [
            PagePath(lang=lang, slug=post.slug)
            for lang in self.config.LANGUAGES
            for post in self.posts_for(lang)
        ]

    def build_page(
        self,
        post: PostRecord,
        all_posts: Sequence[PostRecord],
        current_path: Optional[str] = None,
    ) -> PostPage:
        if current_path is None:
            current_path = self.page_path(post)

        series_posts = (
            resolve_series(post, all_posts, current_path) if post.series else []
        )
        suggestions = select_suggestions(
            post,
            all_posts,
            self.config.SUGGESTION_LIMIT,
            tag_weight=self.config.SUGGESTION_TAG_WEIGHT,
            series_weight=self.config.SUGGESTION_SERIES_WEIGHT,
        )
        other_langs = sorted(lang for lang in post.translations if lang != post.lang)

        return PostPage(
            post=post,
            series_posts=series_posts,
            suggestions=suggestions,
            other_langs=other_langs,
            source_url=self.source_url(post),
        )

    def page_path(self, post: PostRecord) -> str:
        prefix = self.config.POSTS_PREFIX.rstrip("/")
        if post.lang != self.config.DEFAULT_LANG:
            return f"/{post.lang}{prefix}/{post.slug}"
        return f"{prefix}/{post.slug}"

    def source_url(self, post: PostRecord) -> Optional[str]:
        if not self.config.REPO_PATH or not post.source_path:
            return None
        content_dir = self.config.CONTENT_DIR.strip("/")
        return f"{self.config.source_base_url}/{content_dir}/{post.source_path}"

    def build(self, output_dir: Optional[Path] = None) -> BuildManifest:
        output_dir = Path(output_dir or self.config.output_path)
        self.cache.reset()

        paths: List[PagePath] = []
        for lang in self.config.LANGUAGES:
            posts = self.posts_for(lang)
            _warn_duplicate_orders(posts, lang)

            pages = self._build_all(posts)
            lang_dir = output_dir / lang
            lang_dir.mkdir(parents=True, exist_ok=True)
            for page in pages:
                write_page(lang_dir, page)
                paths.append(PagePath(lang=lang, slug=page.post.slug))
            _remove_stale_pages(lang_dir, {page.post.slug for page in pages})
            logger.info(f"Built {len(pages)} pages for '{lang}'")

        manifest = BuildManifest(
            built_at=datetime.datetime.now(datetime.timezone.utc), paths=paths
        )
        (output_dir / MANIFEST_NAME).write_text(
            manifest.model_dump_json(indent=2), encoding="utf-8"
        )
        logger.info(f"Build finished: {len(paths)} pages written to {output_dir}")
        return manifest

    def _build_all(self, posts: List[PostRecord]) -> List[PostPage]:
        workers = max(1, self.config.BUILD_WORKERS)
        if workers == 1:
            return [self.build_page(post, posts) for post in posts]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() keeps input order
            return list(pool.map(lambda post: self.build_page(post, posts), posts))


def write_page(lang_dir: Path, page: PostPage) -> Path:
    path = lang_dir / f"{page.post.slug}.json"
    payload = page.model_dump(mode="json")
    path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True),
        encoding="utf-8",
    )
    return path


def _remove_stale_pages(lang_dir: Path, built_slugs: Set[str]) -> None:
    for path in lang_dir.glob("*.json"):
        if path.stem not in built_slugs:
            path.unlink()
            logger.info(f"Removed stale page {path}")


def _warn_duplicate_orders(posts: Sequence[PostRecord], lang: str) -> None:
    counts = Counter(
        (post.series.name, post.series.order)
        for post in posts
        if post.series is not None and post.series.order is not None
    )
    for (name, order), count in counts.items():
        if count > 1:
            logger.warning(
                f"Series '{name}' ({lang}) has {count} posts with order {order:g}"
            )
