import json
import logging
from pathlib import Path
from typing import List, Optional

from postpages.schemas.page import BuildManifest, PagePath, PostPage
from postpages.services.page_builder import MANIFEST_NAME

logger = logging.getLogger(__name__)


class BuiltPagesRepo:
    """Read-only access to the payloads written by a build."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def list_paths(self) -> List[PagePath]:
        manifest_path = self.output_dir / MANIFEST_NAME
        if not manifest_path.exists():
            logger.warning(f"No build manifest at {manifest_path}")
            return []
        manifest = BuildManifest.model_validate_json(
            manifest_path.read_text(encoding="utf-8")
        )
        return manifest.paths

    def get_page(self, lang: str, slug: str) -> Optional[PostPage]:
        if not self._is_safe(lang) or not self._is_safe(slug):
            return None
        # only pages listed by the last build are served
        if PagePath(lang=lang, slug=slug) not in self.list_paths():
            return None
        path = self.output_dir / lang / f"{slug}.json"
        if not path.is_file():
            return None
        return PostPage.model_validate(json.loads(path.read_text(encoding="utf-8")))

    @staticmethod
    def _is_safe(part: str) -> bool:
        return (
            bool(part)
            and "/" not in part
            and "\\" not in part
            and not part.startswith(".")
        )
