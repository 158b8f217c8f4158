import datetime
import textwrap

from postpages.schemas.post import PostRecord, SeriesMembership


def make_post(
    slug: str,
    *,
    lang: str = "en",
    title: str | None = None,
    tags=(),
    published: datetime.date | None = None,
    series: str | None = None,
    order: float | None = None,
    translations: dict | None = None,
) -> PostRecord:
    """Build a post record with just the fields a test cares about."""
    name = "index.md" if lang == "en" else f"index.{lang}.md"
    return PostRecord(
        source_path=f"{slug}/{name}",
        slug=slug,
        lang=lang,
        title=title or slug.replace("-", " ").title(),
        tags=tuple(tags),
        published=published,
        series=SeriesMembership(name=series, order=order) if series else None,
        translations=translations or {},
    )


class FakeRepo:
    """
    Minimal posts repo stand-in used in service tests.
    Docs are keyed by (slug, lang).
    """

    def __init__(self, docs: dict[tuple[str, str], dict]):
        self.docs = docs

    def list_post_docs(self, lang):
        return [doc for (slug, doc_lang), doc in self.docs.items() if doc_lang == lang]

    def get_post_doc(self, slug, lang):
        return self.docs.get((slug, lang))

    def available_langs(self, slug):
        return sorted(lang for (s, lang) in self.docs if s == slug)


class FakeParser:
    """
    Minimal markdown/content parser stand-in.
    """

    def __init__(self, content_by_path: dict[str, str]):
        self.content_by_path = content_by_path

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_path.get(doc.get("path"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


def doc(slug: str, lang: str = "en") -> dict:
    return {"slug": slug, "lang": lang, "path": f"{slug}/{lang}.md"}


class FakePostsService:
    """
    Minimal posts service stand-in for builder tests; counts loads per language.
    """

    def __init__(self, posts_by_lang: dict[str, list[PostRecord]]):
        self.posts_by_lang = posts_by_lang
        self.calls = []

    def list_posts(self, lang):
        self.calls.append(lang)
        return list(self.posts_by_lang.get(lang, []))


class FakePagesRepo:
    """
    Minimal built-pages repo stand-in for router tests.
    """

    def __init__(self, paths=None, page=None):
        self._paths = paths or []
        self._page = page

    def list_paths(self):
        return self._paths

    def get_page(self, lang, slug):
        return self._page
