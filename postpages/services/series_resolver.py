from typing import Iterable, List, Optional

from postpages.schemas.page import SeriesPosition
from postpages.schemas.post import PostRecord


def strip_series_prefix(title: str, series_name: str) -> str:
    """Drop a leading ``"<series>: "`` from a title, once."""
    prefix = f"{series_name}: "
    if title.startswith(prefix):
        return title[len(prefix) :]
    return title


def is_current_path(current_path: str, slug: str) -> bool:
    path = current_path.rstrip("/")
    return path == slug or path.endswith(f"/{slug}")


def resolve_series(
    target_post: PostRecord,
    all_posts: Iterable[PostRecord],
    current_path: Optional[str] = None,
) -> List[SeriesPosition]:
    """
    Return the posts of the target's series in reading order.

    Args:
        target_post: Post being rendered
        all_posts: Every post of the same language
        current_path: Path of the page being displayed; may carry a locale or
            ``/posts/`` prefix. Defaults to the target's slug.

    Returns:
        One ``SeriesPosition`` per ordered member, or an empty list when the
        target belongs to no series
    """
    if target_post.series is None:
        return []

    name = target_post.series.name
    current_path = target_post.slug if current_path is None else current_path

    members = [
        post
        for post in all_posts
        if post.series is not None
        and post.series.name == name
        and post.series.order is not None
    ]
    # sorted() is stable, so duplicate orders keep collection order
    members = sorted(members, key=lambda post: post.series.order)

    return [
        SeriesPosition(
            slug=post.slug,
            title=post.title,
            display_title=strip_series_prefix(post.title, name),
            order=post.series.order,
            part=i,
            is_current=is_current_path(current_path, post.slug),
        )
        for i, post in enumerate(members, start=1)
    ]
