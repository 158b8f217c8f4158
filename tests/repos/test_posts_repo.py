from postpages.repos.posts_repo import FilesystemPostsRepo


def _write(root, rel, text="---\ntitle: x\n---\n"):
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_list_post_docs_per_language_sorted_by_slug(tmp_path):
    _write(tmp_path, "zeta/index.md")
    _write(tmp_path, "alpha/index.md")
    _write(tmp_path, "alpha/index.es.md")
    _write(tmp_path, "no-index/notes.txt")
    _write(tmp_path, "stray.md")
    repo = FilesystemPostsRepo(tmp_path, default_lang="en")

    english = repo.list_post_docs("en")
    spanish = repo.list_post_docs("es")

    assert [d["slug"] for d in english] == ["alpha", "zeta"]
    assert [d["slug"] for d in spanish] == ["alpha"]
    assert spanish[0]["lang"] == "es"
    assert spanish[0]["rel_path"] == "alpha/index.es.md"


def test_list_post_docs_missing_root_returns_empty(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "nope", default_lang="en")

    assert repo.list_post_docs("en") == []


def test_get_post_doc(tmp_path):
    path = _write(tmp_path, "hello/index.md")
    repo = FilesystemPostsRepo(tmp_path, default_lang="en")

    found = repo.get_post_doc("hello", "en")

    assert found["path"] == str(path)
    assert repo.get_post_doc("hello", "fr") is None
    assert repo.get_post_doc("missing", "en") is None
    assert repo.get_post_doc("../hello", "en") is None


def test_available_langs(tmp_path):
    _write(tmp_path, "hello/index.md")
    _write(tmp_path, "hello/index.es.md")
    _write(tmp_path, "hello/index.pt-BR.md")
    _write(tmp_path, "hello/cover.png")
    repo = FilesystemPostsRepo(tmp_path, default_lang="en")

    assert repo.available_langs("hello") == ["en", "es", "pt-BR"]
    assert repo.available_langs("missing") == []
