import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ContentParser:
    def get_markdown_content(self, doc: dict) -> str:
        """Get the full markdown content of a post file (decoded as text)."""
        raw = self._get_raw_content(doc)
        if raw is None:
            return ""
        return raw.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")

    def _get_raw_content(self, doc: dict) -> str | None:
        path = doc.get("path")
        if not path:
            return None
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"Post file vanished: {path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {path}: {e}")
        return None
