import asyncio

import pytest

from codeshelf.application.use_cases.snippet_use_cases import SnippetQuery, SnippetUseCases
from codeshelf.domain.models.records import Snippet, TagType, User
from codeshelf.infrastructure.persistence.seed_data import seed_demo_data
from codeshelf.shared.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

NESTED = "for (i = 0; i < n; i++) {\n  for (j = 0; j < n; j++) {\n  }\n}"


def run(coro):
    return asyncio.run(coro)


def author(user_id="1", username="demo"):
    return User(
        id=user_id,
        email=f"{username}@example.com",
        name=username.title(),
        username=username,
        password_hash="unused",
    )


def ids(snippets):
    return [snippet.id for snippet in snippets]


def test_create_fills_in_complexity(snippet_cases):
    snippet = run(snippet_cases.create_snippet(author(), "Pairs", "", NESTED, "c"))
    assert snippet.id == "1"
    assert snippet.time_complexity == "O(n²)"
    assert snippet.is_public
    assert snippet.created_at == snippet.updated_at


def test_create_keeps_given_complexity(snippet_cases):
    snippet = run(
        snippet_cases.create_snippet(author(), "Pairs", "", NESTED, "c", time_complexity="O(n log n)")
    )
    assert snippet.time_complexity == "O(n log n)"


def test_auto_analysis_can_be_disabled(snippets, users):
    cases = SnippetUseCases(snippets, users, auto_analyze=False)
    snippet = run(cases.create_snippet(author(), "Pairs", "", NESTED, "c"))
    assert snippet.time_complexity is None


def test_code_length_limit(snippets, users):
    cases = SnippetUseCases(snippets, users, max_code_length=10)
    with pytest.raises(ValidationError):
        run(cases.create_snippet(author(), "Long one", "", "x" * 11, "c"))


def test_ids_continue_after_seed_data(seeded, snippet_cases):
    snippet = run(snippet_cases.create_snippet(author(), "Fifth", "", "x = 1", "python"))
    assert snippet.id == "5"


def test_private_snippet_visible_only_to_author(seeded, snippet_cases):
    assert run(snippet_cases.get_snippet("4", viewer_id="1")).title == "Bubble Sort Draft"
    with pytest.raises(NotFoundError):
        run(snippet_cases.get_snippet("4", viewer_id="2"))
    with pytest.raises(NotFoundError):
        run(snippet_cases.get_snippet("4"))


def test_missing_snippet(seeded, snippet_cases):
    with pytest.raises(NotFoundError):
        run(snippet_cases.get_snippet("404"))


def test_update_by_owner(seeded, snippet_cases):
    updated = run(
        snippet_cases.update_snippet(
            "1", "1", {"title": "Faster Quick Sort", "tags": ("1",), "author_id": "2"}
        )
    )
    assert updated.title == "Faster Quick Sort"
    assert updated.tags == ["1"]
    assert updated.author_id == "1"
    assert updated.updated_at > updated.created_at
    assert run(snippet_cases.get_snippet("1")).title == "Faster Quick Sort"


def test_update_by_other_user(seeded, snippet_cases):
    with pytest.raises(PermissionDeniedError, match="You can only edit your own snippets"):
        run(snippet_cases.update_snippet("1", "2", {"title": "Mine now"}))


def test_delete(seeded, snippet_cases):
    with pytest.raises(PermissionDeniedError, match="You can only delete your own snippets"):
        run(snippet_cases.delete_snippet("2", "1"))
    run(snippet_cases.delete_snippet("2", "2"))
    with pytest.raises(NotFoundError):
        run(snippet_cases.get_snippet("2"))


def test_public_listing_is_newest_first(seeded, snippet_cases):
    assert ids(run(snippet_cases.list_snippets(SnippetQuery(public_only=True)))) == ["3", "2", "1"]
    oldest = SnippetQuery(public_only=True, sort="oldest")
    assert ids(run(snippet_cases.list_snippets(oldest))) == ["1", "2", "3"]


def test_listing_filters(seeded, snippet_cases):
    by_language = SnippetQuery(public_only=True, language="javascript")
    assert ids(run(snippet_cases.list_snippets(by_language))) == ["3", "1"]
    search = SnippetQuery(public_only=True, search_query="BINARY")
    assert ids(run(snippet_cases.list_snippets(search))) == ["2"]
    private = SnippetQuery(author_id="1", visibility="private")
    assert ids(run(snippet_cases.list_snippets(private))) == ["4"]


def test_listing_with_authors_drops_orphans(seeded, snippets, snippet_cases):
    run(snippets.add(Snippet(id="9", title="Orphan", description="", code="x", language="c", author_id="999")))
    items = run(snippet_cases.list_snippets_with_authors(SnippetQuery(public_only=True)))
    assert "9" not in [item.snippet.id for item in items]
    assert {item.author.username for item in items} == {"demo", "johndoe", "sarahsmith"}


def test_language_counts(seeded, snippet_cases):
    counts = run(snippet_cases.get_all_languages())
    assert [(item.language, item.count) for item in counts] == [("javascript", 2), ("python", 1)]


def test_user_stats_include_private_snippets(seeded, snippet_cases):
    assert run(snippet_cases.count_user_snippets("1")) == 2
    assert run(snippet_cases.get_user_languages("1")) == ["go", "javascript"]


def test_public_profile(seeded, snippet_cases):
    profile = run(snippet_cases.get_user_public_profile("demo"))
    assert profile.user.username == "demo"
    assert ids(profile.snippets) == ["1"]
    assert profile.stats.total_snippets == 1
    assert profile.stats.languages == ["javascript"]
    assert profile.stats.language_count == 1


def test_unknown_profile(seeded, snippet_cases):
    with pytest.raises(NotFoundError):
        run(snippet_cases.get_user_public_profile("ghost"))


def test_tags(seeded, tag_cases):
    assert len(run(tag_cases.list_tags(TagType.LANGUAGE))) == 10
    assert len(run(tag_cases.list_tags())) == 20
    assert run(tag_cases.get_tag_by_slug("python")).name == "Python"
    with pytest.raises(NotFoundError):
        run(tag_cases.get_tag_by_slug("cobol"))


def test_create_tag(seeded, tag_cases):
    tag = run(tag_cases.create_tag("Dynamic Programming", TagType.TOPIC))
    assert tag.slug == "dynamic-programming"
    with pytest.raises(ConflictError):
        run(tag_cases.create_tag("python", TagType.LANGUAGE))
    with pytest.raises(ValidationError):
        run(tag_cases.create_tag("!!", TagType.TOPIC))


def test_seeding_is_skipped_for_populated_store(seeded):
    users, snippets, tags = seeded
    assert run(seed_demo_data(users, snippets, tags)) is False


@pytest.mark.parametrize("field_name", ["title", "code", "language", "tags", "is_public"])
def test_update_rejects_null_for_required_fields(seeded, snippet_cases, field_name):
    with pytest.raises(ValidationError):
        run(snippet_cases.update_snippet("1", "1", {field_name: None, "description": "changed"}))
    stored = run(snippet_cases.get_snippet("1"))
    assert stored.title == "Quick Sort Algorithm"
    assert stored.description != "changed"


def test_update_can_clear_time_complexity(seeded, snippet_cases):
    updated = run(snippet_cases.update_snippet("1", "1", {"time_complexity": None}))
    assert updated.time_complexity is None
