import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from postpages import dependencies as deps
from postpages.repos.pages_repo import BuiltPagesRepo
from postpages.schemas.page import PagePath, PostPage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/pages", response_model=List[PagePath])
def list_pages(repo: BuiltPagesRepo = Depends(deps.get_pages_repo)):
    """List every built page."""
    try:
        return repo.list_paths()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing pages: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve pages")


@router.get("/pages/{lang}/{slug}", response_model=PostPage)
def get_page(
    lang: str,
    slug: str,
    repo: BuiltPagesRepo = Depends(deps.get_pages_repo),
):
    """Get the built payload of one post page."""
    try:
        page = repo.get_page(lang, slug)
        if not page:
            raise HTTPException(status_code=404, detail="Page not found")
        return page
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving page {lang}/{slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve page")
