from postpages.services.toc import extract_headings, normalize_heading, slugify_heading


def test_extract_headings_respects_depth_and_skips_code():
    md = "\n".join(
        [
            "# Title",
            "text",
            "```python",
            "# not a heading",
            "```",
            "## Setup",
            "#### Too deep",
            "### Details ###",
        ]
    )

    headings = extract_headings(md, max_depth=3)

    assert [(h.depth, h.text, h.slug) for h in headings] == [
        (1, "Title", "title"),
        (2, "Setup", "setup"),
        (3, "Details", "details"),
    ]


def test_duplicate_headings_get_unique_slugs():
    md = "## Intro\n\n## Intro\n\n## Intro"

    headings = extract_headings(md)

    assert [h.slug for h in headings] == ["intro", "intro-1", "intro-2"]


def test_heading_without_space_is_not_a_heading():
    assert extract_headings("#hashtag\n##also-not") == []


def test_normalize_heading_strips_emoji():
    assert normalize_heading("🚀  Launch   day") == "Launch day"


def test_slugify_heading_drops_punctuation():
    assert slugify_heading("What's new in C#?") == "whats-new-in-c"
    assert slugify_heading("!!!") == "section"


def test_suffixed_slug_never_collides_with_a_literal_heading():
    headings = extract_headings("## Intro\n\n## Intro\n\n## Intro 1")

    slugs = [h.slug for h in headings]
    assert slugs == ["intro", "intro-1", "intro-1-1"]
    assert len(set(slugs)) == len(slugs)


def test_tilde_line_inside_backtick_fence_does_not_close_it():
    md = "```\n~~~\n# inside code\n```\n# Real"

    assert [h.text for h in extract_headings(md)] == ["Real"]


def test_shorter_fence_does_not_close_longer_one():
    md = "````\n```\n# inside code\n````\n# After"

    assert [h.text for h in extract_headings(md)] == ["After"]
