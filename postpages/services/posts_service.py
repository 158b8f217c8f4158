import datetime
import logging
import math
import os
from typing import Dict, List, Optional

import frontmatter

from postpages.schemas.post import PostRecord, SeriesMembership
from postpages.services.content_parser import ContentParser
from postpages.services.toc import extract_headings
from postpages.settings import settings

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parser=None):
        self.repo = repo
        self.parser = parser or ContentParser()

    def list_posts(self, lang: str) -> List[PostRecord]:
        """All parseable posts of one language, newest first."""
        posts = []
        for doc in self.repo.list_post_docs(lang):
            post = parse_post_data(
                doc,
                parser=self.parser,
                translations=self._translations_for(doc["slug"]),
            )
            if post:
                posts.append(post)

        posts.sort(key=lambda p: p.published or datetime.date.min, reverse=True)
        return posts

    def get_post(self, slug: str, lang: str) -> Optional[PostRecord]:
        doc = self.repo.get_post_doc(slug, lang)
        if not doc:
            return None
        return parse_post_data(
            doc, parser=self.parser, translations=self._translations_for(slug)
        )

    def _translations_for(self, slug: str) -> Dict[str, str]:
        return {lang: slug for lang in self.repo.available_langs(slug)}


def parse_post_data(
    doc: dict,
    *,
    parser,
    translations: Optional[Dict[str, str]] = None,
    toc_max_depth: Optional[int] = None,
) -> Optional[PostRecord]:
    """Parse frontmatter and return a post record"""
    slug = _normalize_slug(doc.get("slug", ""))
    try:
        markdown = parser.get_markdown_content(doc)
        if not markdown:
            logger.warning(f"No markdown content found for post {slug}")
            return None

        parsed = frontmatter.loads(markdown)
        metadata = parsed.metadata or {}
        lang = doc.get("lang") or settings.DEFAULT_LANG
        max_depth = (
            settings.TOC_MAX_DEPTH if toc_max_depth is None else toc_max_depth
        )

        return PostRecord(
            slug=slug,
            lang=lang,
            title=_derive_title(metadata, slug),
            description=metadata.get("description"),
            tags=_normalize_list(metadata.get("tags")),
            published=_convert_date(metadata.get("published")),
            edited=_convert_date(metadata.get("edited")),
            series=_series_membership(metadata, slug),
            translations=translations or {},
            collection_slug=metadata.get("collection"),
            authors=_normalize_list(metadata.get("authors")),
            original_link=metadata.get("originalLink"),
            source_path=doc.get("rel_path"),
            reading_time=calculate_reading_time(parsed.content),
            headings=extract_headings(parsed.content, max_depth=max_depth),
        )
    except Exception as e:
        logger.warning(f"Failed to parse post {slug}: {e}")
        return None


def _normalize_slug(slug: str) -> str:
    base, _ = os.path.splitext(slug.strip("/"))
    return base


def _derive_title(metadata: dict, slug: str) -> str:
    if metadata and metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def _normalize_list(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple, set)):
        value = [value]
    items = (str(item).strip() for item in value if item)
    return list(dict.fromkeys(item for item in items if item))


def _convert_date(value) -> Optional[datetime.date]:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.date.fromisoformat(value.strip()[:10])
        except ValueError:
            logger.warning(f"Unparseable date '{value}', ignoring")
    return None


def _coerce_order(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        order = float(value)
    except (TypeError, ValueError):
        return None
    return order if math.isfinite(order) else None


def _series_membership(metadata: dict, slug: str) -> Optional[SeriesMembership]:
    name = metadata.get("series")
    if not name:
        return None
    order = _coerce_order(metadata.get("order"))
    if order is None:
        logger.warning(
            f"Post {slug} is in series '{name}' without a numeric order; "
            "leaving it out of series navigation"
        )
    return SeriesMembership(name=str(name), order=order)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
