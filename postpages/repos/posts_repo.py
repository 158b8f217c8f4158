import re
from pathlib import Path
from typing import List, Optional

from postpages.settings import settings

_TRANSLATION_RE = re.compile(r"^index\.(?P<lang>[A-Za-z-]+)\.md$")


class FilesystemPostsRepo:
    """Posts stored as ``<root>/<slug>/index.md`` plus ``index.<lang>.md``."""

    def __init__(self, root: Path, default_lang: Optional[str] = None):
        self.root = Path(root)
        self.default_lang = default_lang or settings.DEFAULT_LANG

    def list_post_docs(self, lang: str) -> List[dict]:
        if not self.root.is_dir():
            return []
        docs = []
        for post_dir in sorted(p for p in self.root.iterdir() if p.is_dir()):
            doc = self._doc_for(post_dir, lang)
            if doc:
                docs.append(doc)
        return docs

    def get_post_doc(self, slug: str, lang: str) -> Optional[dict]:
        post_dir = self.root / slug
        if not self._is_valid_slug(slug) or not post_dir.is_dir():
            return None
        return self._doc_for(post_dir, lang)

    def available_langs(self, slug: str) -> List[str]:
        post_dir = self.root / slug
        if not self._is_valid_slug(slug) or not post_dir.is_dir():
            return []
        langs = set()
        for f in post_dir.iterdir():
            if f.name == "index.md":
                langs.add(self.default_lang)
                continue
            m = _TRANSLATION_RE.match(f.name)
            if m:
                langs.add(m.group("lang"))
        return sorted(langs)

    def _doc_for(self, post_dir: Path, lang: str) -> Optional[dict]:
        name = "index.md" if lang == self.default_lang else f"index.{lang}.md"
        path = post_dir / name
        if not path.is_file():
            return None
        return {
            "slug": post_dir.name,
            "lang": lang,
            "path": str(path),
            "rel_path": path.relative_to(self.root).as_posix(),
        }

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        return (
            bool(slug)
            and "/" not in slug
            and "\\" not in slug
            and slug not in {".", ".."}
        )
