"""
Tests for users, vocabularies and tags.
"""
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from core.security import verify_password
from models.review import Review
from models.tag import Tag
from models.user import User
from models.vocabulary import Vocabulary, vocabularies_tags


def count(db, column):
    return db.execute(select(func.count(column))).scalar_one()


class TestUsers:
    def test_register_hashes_password_and_normalises_email(self, client, db):
        response = client.post("/users", json={"email": "New@Example.com", "password": "secret1", "name": "Ana"})

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "new@example.com"
        assert body["role"] == "user"
        assert body["emailVerified"] is False
        stored = db.execute(select(User).where(User.email == "new@example.com")).scalar_one()
        assert stored.password_hash != "secret1"
        assert verify_password("secret1", stored.password_hash)

    def test_duplicate_email_is_a_conflict(self, client, user):
        response = client.post("/users", json={"email": user.email, "password": "secret1"})
        assert response.status_code == 409

    def test_register_reports_all_errors(self, client):
        response = client.post("/users", json={"email": "nope", "password": "123"})
        assert response.status_code == 400
        assert {d["field"] for d in response.json()["details"]} == {"email", "password"}

    def test_me(self, client, headers, user):
        response = client.get("/users/me", headers=headers)
        assert response.status_code == 200
        assert response.json()["id"] == str(user.id)

    def test_malformed_identity_header(self, client):
        response = client.get("/users/me", headers={"X-User-Id": "12"})
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_identity_of_a_user_that_does_not_exist(self, client):
        response = client.post("/vocabularies", json={"word": "x"}, headers={"X-User-Id": str(uuid4())})
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_deleted_user_is_no_longer_a_caller(self, client, headers):
        assert client.delete("/users/me", headers=headers).status_code == 204
        assert client.get("/users/me", headers=headers).status_code == 401

    def test_settings_round_trip(self, client, headers):
        defaults = client.get("/users/me/settings", headers=headers).json()["settings"]
        assert defaults["theme"] == "system"

        response = client.put("/users/me/settings", json={"theme": "dark", "dailyGoal": "30"}, headers=headers)

        assert response.status_code == 200
        settings = response.json()["settings"]
        assert settings["theme"] == "dark"
        assert settings["dailyGoal"] == 30
        assert settings["language"] == "en"
        assert client.get("/users/me/settings", headers=headers).json()["settings"] == settings

    def test_settings_validation(self, client, headers):
        response = client.put("/users/me/settings", json={"theme": "neon", "dailyGoal": 0}, headers=headers)
        assert response.status_code == 400
        assert {d["field"] for d in response.json()["details"]} == {"theme", "dailyGoal"}

        response = client.put("/users/me/settings", json={"fontSize": 14}, headers=headers)
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "fontSize"

    def test_deleting_a_user_cascades(self, client, headers, db, user, vocabulary, tag):
        vocabulary.tags.append(tag)
        db.add(Review(user_id=user.id, vocabulary_id=vocabulary.id, next_review=vocabulary.created_at))
        db.commit()

        response = client.delete("/users/me", headers=headers)

        assert response.status_code == 204
        db.expire_all()
        assert count(db, User.id) == 0
        assert count(db, Vocabulary.id) == 0
        assert count(db, Tag.id) == 0
        assert count(db, Review.id) == 0
        assert count(db, vocabularies_tags.c.tagId) == 0


class TestVocabularies:
    def test_create_with_tags(self, client, headers, tag):
        response = client.post(
            "/vocabularies",
            json={
                "word": "  wanderlust ",
                "partOfSpeech": "noun",
                "definition": "a strong desire to travel",
                "audioUrl": "https://cdn.example.com/wanderlust.mp3",
                "tagIds": [str(tag.id)],
            },
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["word"] == "wanderlust"
        assert body["difficulty"] == 1
        assert body["partOfSpeech"] == "noun"
        assert [t["name"] for t in body["tags"]] == ["travel"]

    def test_create_reports_every_invalid_field(self, client, headers):
        response = client.post(
            "/vocabularies",
            json={"word": "", "partOfSpeech": "thing", "difficulty": 9, "imageUrl": "not a url"},
            headers=headers,
        )

        assert response.status_code == 400
        assert {d["field"] for d in response.json()["details"]} == {"word", "partOfSpeech", "difficulty", "imageUrl"}

    def test_unknown_tag_is_rejected(self, client, headers):
        response = client.post("/vocabularies", json={"word": "x", "tagIds": [str(uuid4())]}, headers=headers)
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "tagIds"

    def test_list_paginates_and_searches(self, client, headers, db, user):
        db.add_all([Vocabulary(user_id=user.id, word=w) for w in ("apple", "apricot", "banana")])
        db.commit()

        page = client.get("/vocabularies?limit=2&page=1", headers=headers).json()
        assert page["total"] == 3
        assert len(page["items"]) == 2

        found = client.get("/vocabularies?search=ap", headers=headers).json()
        assert sorted(item["word"] for item in found["items"]) == ["apple", "apricot"]

    def test_list_query_validation(self, client, headers):
        response = client.get("/vocabularies?page=0&limit=500", headers=headers)
        assert response.status_code == 400
        details = response.json()["details"]
        assert {d["field"] for d in details} == {"page", "limit"}
        assert {d["location"] for d in details} == {"query"}

    def test_update_and_delete(self, client, headers, vocabulary):
        url = f"/vocabularies/{vocabulary.id}"
        response = client.put(url, json={"difficulty": 4, "example": "What serendipity!"}, headers=headers)
        assert response.status_code == 200
        assert response.json()["difficulty"] == 4
        assert response.json()["word"] == "serendipity"

        assert client.delete(url, headers=headers).status_code == 204
        assert client.get(url, headers=headers).status_code == 404

    @pytest.mark.parametrize("field", ["word", "difficulty"])
    def test_update_refuses_null_on_required_fields(self, client, headers, db, vocabulary, field):
        response = client.put(f"/vocabularies/{vocabulary.id}", json={field: None}, headers=headers)

        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == [field]
        db.refresh(vocabulary)
        assert (vocabulary.word, vocabulary.difficulty) == ("serendipity", 1)

    def test_update_clears_optional_fields_with_null(self, client, headers, vocabulary):
        response = client.put(f"/vocabularies/{vocabulary.id}", json={"definition": None}, headers=headers)
        assert response.status_code == 200
        assert response.json()["definition"] is None

    def test_vocabulary_is_scoped_to_owner(self, client, other_user, vocabulary):
        response = client.get(f"/vocabularies/{vocabulary.id}", headers={"X-User-Id": str(other_user.id)})
        assert response.status_code == 404


class TestTags:
    def test_create_list_update_delete(self, client, headers):
        created = client.post("/tags", json={"name": "food", "color": "#00ff00"}, headers=headers)
        assert created.status_code == 201
        tag_id = created.json()["id"]

        assert [t["name"] for t in client.get("/tags", headers=headers).json()] == ["food"]

        updated = client.put(f"/tags/{tag_id}", json={"name": "cooking"}, headers=headers)
        assert updated.status_code == 200
        assert updated.json()["name"] == "cooking"
        assert updated.json()["color"] == "#00ff00"

        assert client.delete(f"/tags/{tag_id}", headers=headers).status_code == 204
        assert client.get("/tags", headers=headers).json() == []

    def test_duplicate_name_is_a_conflict(self, client, headers, tag):
        response = client.post("/tags", json={"name": tag.name}, headers=headers)
        assert response.status_code == 409
        assert response.json()["error"] == "Conflict"

    def test_invalid_tag(self, client, headers):
        response = client.post("/tags", json={"name": "", "color": "red"}, headers=headers)
        assert response.status_code == 400
        assert {d["field"] for d in response.json()["details"]} == {"name", "color"}

    def test_update_refuses_null_name(self, client, headers, db, tag):
        response = client.put(f"/tags/{tag.id}", json={"name": None}, headers=headers)

        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == ["name"]
        db.refresh(tag)
        assert tag.name == "travel"

    def test_deleting_tag_keeps_vocabulary(self, client, headers, db, vocabulary, tag):
        vocabulary.tags.append(tag)
        db.commit()

        assert client.delete(f"/tags/{tag.id}", headers=headers).status_code == 204

        body = client.get(f"/vocabularies/{vocabulary.id}", headers=headers).json()
        assert body["tags"] == []
