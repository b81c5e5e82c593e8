import asyncio
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pymongo.errors import DuplicateKeyError

from codeshelf.domain.models.records import Snippet, Tag, TagType, User
from codeshelf.infrastructure.persistence.mongodb_service import MongoDBService
from codeshelf.infrastructure.persistence.repositories import (
    MongoSnippetRepository,
    MongoTagRepository,
    MongoUserRepository,
    _aware,
)
from codeshelf.shared.exceptions import ConflictError

CREATED = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)


def run(coro):
    return asyncio.run(coro)


def _naive_utc(value):
    # the driver hands datetimes back without tzinfo
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, field, direction):
        self._docs.sort(key=lambda doc: doc[field], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return self._docs


class FakeCollection:
    """Just enough of a motor collection, with unique index checks."""

    def __init__(self, unique_fields):
        self.unique_fields = unique_fields
        self.docs = []

    def _check_unique(self, document, ignore=None):
        for doc in self.docs:
            if doc is ignore:
                continue
            for field in self.unique_fields:
                if doc.get(field) == document.get(field):
                    raise DuplicateKeyError(
                        "E11000 duplicate key error", 11000, {"keyValue": {field: document[field]}}
                    )

    async def insert_one(self, document):
        self._check_unique(document)
        stored = {key: _naive_utc(value) for key, value in document.items()}
        stored["_id"] = len(self.docs) + 1
        self.docs.append(stored)

    async def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query):
        return FakeCursor([dict(doc) for doc in self.docs if _matches(doc, query)])

    async def replace_one(self, query, document):
        for index, doc in enumerate(self.docs):
            if _matches(doc, query):
                self._check_unique(document, ignore=doc)
                stored = {key: _naive_utc(value) for key, value in document.items()}
                stored["_id"] = doc["_id"]
                self.docs[index] = stored
                return SimpleNamespace(matched_count=1)
        return SimpleNamespace(matched_count=0)

    async def delete_one(self, query):
        before = len(self.docs)
        self.docs = [doc for doc in self.docs if not _matches(doc, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    async def count_documents(self, query):
        return len([doc for doc in self.docs if _matches(doc, query)])


@pytest.fixture
def service():
    mongo = MongoDBService(uri="mongodb://unused", db_name="test")
    mongo.db = {
        "users": FakeCollection(("id", "email", "username")),
        "snippets": FakeCollection(("id",)),
        "tags": FakeCollection(("id", "slug")),
    }
    return mongo


def make_user(user_id="u1", email="ada@example.com", username="ada"):
    return User(
        id=user_id,
        email=email,
        name="Ada",
        username=username,
        password_hash="pbkdf2_sha256$1000$salt$digest",
        created_at=CREATED,
        updated_at=CREATED,
    )


def make_snippet(snippet_id, created=CREATED):
    return Snippet(
        id=snippet_id,
        title=f"Snippet {snippet_id}",
        description="",
        code="x = 1",
        language="python",
        author_id="u1",
        time_complexity="O(1)",
        tags=["3"],
        created_at=created,
        updated_at=created,
    )


def test_aware_restores_utc():
    naive = datetime(2024, 1, 1, 8, 30)
    assert _aware(naive) == datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)
    assert _aware(CREATED) is CREATED
    assert _aware(None) is None


def test_user_roundtrip(service):
    users = MongoUserRepository(service)
    user = make_user()
    run(users.add(user))

    stored = service.db["users"].docs[0]
    assert stored["created_at"].tzinfo is None
    assert "_id" not in run(service.find_one("users", {"id": "u1"}))

    loaded = run(users.get_by_email("ada@example.com"))
    assert loaded == user
    assert loaded.created_at.tzinfo is not None
    assert run(users.get_by_username("ada")).id == "u1"
    assert run(users.get_by_id("missing")) is None


def test_user_update(service):
    users = MongoUserRepository(service)
    user = make_user()
    run(users.add(user))
    user.name = "Ada Lovelace"
    run(users.update(user))
    assert run(users.get_by_id("u1")).name == "Ada Lovelace"
    assert len(run(users.list_all())) == 1


def test_duplicate_email_is_a_conflict(service):
    users = MongoUserRepository(service)
    run(users.add(make_user()))
    with pytest.raises(ConflictError) as excinfo:
        run(users.add(make_user(user_id="u2", username="other")))
    assert excinfo.value.details == {"collection": "users", "fields": ["email"]}


def test_duplicate_username_on_update_is_a_conflict(service):
    users = MongoUserRepository(service)
    run(users.add(make_user()))
    run(users.add(make_user(user_id="u2", email="bob@example.com", username="bob")))
    bob = run(users.get_by_id("u2"))
    bob.username = "ada"
    with pytest.raises(ConflictError):
        run(users.update(bob))


def test_snippet_roundtrip_and_order(service):
    snippets = MongoSnippetRepository(service)
    later = datetime(2024, 4, 1, tzinfo=timezone.utc)
    run(snippets.add(make_snippet("2", created=later)))
    run(snippets.add(make_snippet("1")))

    assert run(snippets.get("1")) == make_snippet("1")
    assert [s.id for s in run(snippets.list_all())] == ["1", "2"]

    assert run(snippets.delete("1")) is True
    assert run(snippets.delete("1")) is False
    assert run(snippets.get("1")) is None


def test_next_id_skips_taken_ids(service):
    snippets = MongoSnippetRepository(service)
    assert run(snippets.next_id()) == "1"
    run(snippets.add(make_snippet("1")))
    run(snippets.add(make_snippet("3")))
    assert run(snippets.next_id()) == "4"


def test_duplicate_snippet_id_is_a_conflict(service):
    snippets = MongoSnippetRepository(service)
    run(snippets.add(make_snippet("1")))
    with pytest.raises(ConflictError):
        run(snippets.add(make_snippet("1")))


def test_tag_roundtrip(service):
    tags = MongoTagRepository(service)
    run(tags.add(Tag(id="3", name="Python", slug="python", type=TagType.LANGUAGE)))
    run(tags.add(Tag(id="1", name="Go", slug="go", type=TagType.LANGUAGE)))
    run(tags.add(Tag(id="11", name="Algorithm", slug="algorithm", type=TagType.TOPIC)))

    assert service.db["tags"].docs[0]["type"] == "language"
    assert run(tags.get_by_slug("python")).type is TagType.LANGUAGE
    assert [t.name for t in run(tags.list_by_type(TagType.LANGUAGE))] == ["Go", "Python"]
    assert [t.slug for t in run(tags.list_all())] == ["algorithm", "go", "python"]


def test_duplicate_tag_slug_is_a_conflict(service):
    tags = MongoTagRepository(service)
    run(tags.add(Tag(id="3", name="Python", slug="python", type=TagType.LANGUAGE)))
    with pytest.raises(ConflictError):
        run(tags.add(Tag(id="99", name="python", slug="python", type=TagType.TOPIC)))
