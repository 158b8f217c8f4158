import logging
import sys

from postpages.repos.posts_repo import FilesystemPostsRepo
from postpages.services.page_builder import PageBuilder
from postpages.services.posts_service import PostsService
from postpages.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    repo = FilesystemPostsRepo(settings.content_path)
    builder = PageBuilder(PostsService(repo))
    try:
        manifest = builder.build(settings.output_path)
        logger.info(f"Build completed successfully ({len(manifest.paths)} pages).")
        return 0
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
