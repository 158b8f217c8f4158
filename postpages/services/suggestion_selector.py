from datetime import date
from typing import Iterable, List, Optional

from postpages.schemas.page import Suggestion
from postpages.schemas.post import PostRecord
from postpages.settings import settings


def _in_same_series(a: PostRecord, b: PostRecord) -> bool:
    return (
        a.series is not None
        and b.series is not None
        and a.series.name == b.series.name
    )


def score_candidate(
    target_post: PostRecord,
    candidate: PostRecord,
    *,
    tag_weight: int,
    series_weight: int,
) -> int:
    shared_tags = set(target_post.tags) & set(candidate.tags)
    score = tag_weight * len(shared_tags)
    if _in_same_series(target_post, candidate):
        score += series_weight
    return score


def _recency(published: Optional[date]) -> int:
    # undated posts rank behind every dated one
    return published.toordinal() if published else 0


def select_suggestions(
    target_post: PostRecord,
    all_posts: Iterable[PostRecord],
    limit: Optional[int] = None,
    *,
    tag_weight: Optional[int] = None,
    series_weight: Optional[int] = None,
) -> List[Suggestion]:
    """
    Pick the posts to suggest alongside ``target_post``.

    Candidates are ranked by score (shared tags, then series affinity),
    newer publish date, then slug, so the result is the same on every build.
    """
    limit = settings.SUGGESTION_LIMIT if limit is None else limit
    tag_weight = settings.SUGGESTION_TAG_WEIGHT if tag_weight is None else tag_weight
    series_weight = (
        settings.SUGGESTION_SERIES_WEIGHT if series_weight is None else series_weight
    )
    if limit <= 0:
        return []

    candidates = []
    for post in all_posts:
        if post.lang != target_post.lang or post.slug == target_post.slug:
            continue
        score = score_candidate(
            target_post, post, tag_weight=tag_weight, series_weight=series_weight
        )
        candidates.append((-score, -_recency(post.published), post.slug, post))

    candidates.sort(key=lambda c: c[:3])

    return [
        Suggestion(slug=post.slug, title=post.title, score=-neg_score)
        for neg_score, _, _, post in candidates[:limit]
    ]
