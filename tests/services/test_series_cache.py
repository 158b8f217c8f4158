from postpages.services.series_cache import SeriesPostCache
from tests.conftest import FakePostsService, make_post


def test_get_loads_once_per_language():
    service = FakePostsService({"en": [make_post("a")], "es": [make_post("b", lang="es")]})
    cache = SeriesPostCache()

    first = cache.get("en", service.list_posts)
    second = cache.get("en", service.list_posts)
    cache.get("es", service.list_posts)

    assert first is second
    assert service.calls == ["en", "es"]


def test_reset_forces_reload():
    service = FakePostsService({"en": [make_post("a")]})
    cache = SeriesPostCache()
    cache.get("en", service.list_posts)

    cache.reset()

    assert "en" not in cache
    cache.get("en", service.list_posts)
    assert service.calls == ["en", "en"]


def test_invalidate_only_drops_one_language():
    service = FakePostsService({"en": [], "es": []})
    cache = SeriesPostCache()
    cache.get("en", service.list_posts)
    cache.get("es", service.list_posts)

    cache.invalidate("es")

    assert "en" in cache
    assert "es" not in cache
