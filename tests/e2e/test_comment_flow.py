"""End-to-end tests for comment threads."""

from diary.domain.value import Emoji
from tests.e2e.helpers import add_comment, create_diary, register
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestCommentThreads:
    def test_comment_reply_and_list(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        diary = create_diary(client, alice["headers"])

        # Act
        top = add_comment(client, bob["headers"], diary["id"], "Great entry")
        reply = add_comment(
            client,
            alice["headers"],
            diary["id"],
            "Thanks!",
            parent_comment=top.json()["data"]["id"],
        )
        listing = client.get(f"/api/diaries/{diary['id']}/comments")

        # Assert
        assert top.status_code == 201
        assert top.json()["message"] == "Comment added successfully"
        assert reply.status_code == 201
        assert reply.json()["message"] == "Reply added successfully"
        body = listing.json()
        assert body["pagination"]["total"] == 1
        [thread] = body["data"]
        assert thread["content"] == "Great entry"
        assert [r["content"] for r in thread["replies"]] == ["Thanks!"]

    def test_reply_accepts_camel_case_parent_field(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"])
        top = add_comment(client, alice["headers"], diary["id"]).json()["data"]

        reply = client.post(
            f"/api/diaries/{diary['id']}/comments",
            json={"content": "Replying", "parentComment": top["id"]},
            headers=alice["headers"],
        )

        assert reply.status_code == 201
        assert reply.json()["data"]["parent_id"] == top["id"]

    def test_reply_to_reply_is_rejected(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"])
        top = add_comment(client, alice["headers"], diary["id"]).json()["data"]
        reply = add_comment(
            client, alice["headers"], diary["id"], parent_comment=top["id"]
        ).json()["data"]

        response = add_comment(
            client, alice["headers"], diary["id"], parent_comment=reply["id"]
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("Cannot reply to a reply")

    def test_cannot_comment_on_private_diary(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"], is_public=False)

        response = add_comment(client, alice["headers"], diary["id"])

        assert response.status_code == 403

    def test_guest_cannot_comment(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"])

        response = client.post(
            f"/api/diaries/{diary['id']}/comments", json={"content": "Hi"}
        )

        assert response.status_code == 401

    def test_comment_count_on_diary(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"])
        top = add_comment(client, alice["headers"], diary["id"]).json()["data"]
        add_comment(client, alice["headers"], diary["id"], parent_comment=top["id"])

        response = client.get(f"/api/diaries/{diary['id']}")

        assert response.json()["data"]["comment_count"] == 2


class TestCommentModeration:
    def test_owner_deletes_others_comment_with_replies(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        diary = create_diary(client, alice["headers"])
        top = add_comment(client, bob["headers"], diary["id"]).json()["data"]
        add_comment(client, bob["headers"], diary["id"], parent_comment=top["id"])

        # Act
        response = client.delete(
            f"/api/diaries/{diary['id']}/comments/{top['id']}",
            headers=alice["headers"],
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["data"]["deleted_count"] == 2
        listing = client.get(f"/api/diaries/{diary['id']}/comments")
        assert listing.json()["data"] == []

    def test_deleting_one_thread_leaves_other_threads_untouched(self, client):
        # Arrange
        alice = register(client, "alice")
        bob = register(client, "bob")
        diary = create_diary(client, alice["headers"])
        base = f"/api/diaries/{diary['id']}/comments"
        doomed = add_comment(client, bob["headers"], diary["id"], "First").json()["data"]
        add_comment(
            client, alice["headers"], diary["id"], "Re: first", parent_comment=doomed["id"]
        )
        kept = add_comment(client, bob["headers"], diary["id"], "Second").json()["data"]
        kept_reply = add_comment(
            client, alice["headers"], diary["id"], "Re: second", parent_comment=kept["id"]
        ).json()["data"]
        client.post(
            f"{base}/{kept_reply['id']}/react",
            json={"emoji": "\U0001f44f"},
            headers=bob["headers"],
        )

        # Act
        response = client.delete(f"{base}/{doomed['id']}", headers=alice["headers"])

        # Assert
        assert response.json()["data"]["deleted_count"] == 2
        threads = client.get(base).json()["data"]
        assert [t["id"] for t in threads] == [kept["id"]]
        assert [r["id"] for r in threads[0]["replies"]] == [kept_reply["id"]]
        assert threads[0]["replies"][0]["reaction_summary"] == {"\U0001f44f": 1}

    def test_third_party_cannot_delete(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        carol = register(client, "carol")
        diary = create_diary(client, alice["headers"])
        comment = add_comment(client, bob["headers"], diary["id"]).json()["data"]

        response = client.delete(
            f"/api/diaries/{diary['id']}/comments/{comment['id']}",
            headers=carol["headers"],
        )

        assert response.status_code == 403

    def test_only_author_edits(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")
        diary = create_diary(client, alice["headers"])
        comment = add_comment(client, bob["headers"], diary["id"]).json()["data"]
        url = f"/api/diaries/{diary['id']}/comments/{comment['id']}"

        by_owner = client.put(url, json={"content": "Edited"}, headers=alice["headers"])
        by_author = client.put(url, json={"content": "Edited"}, headers=bob["headers"])

        assert by_owner.status_code == 403
        assert by_author.status_code == 200
        assert by_author.json()["data"]["content"] == "Edited"


class TestCommentReactions:
    def test_react_switches_emoji(self, client):
        alice = register(client, "alice")
        diary = create_diary(client, alice["headers"])
        comment = add_comment(client, alice["headers"], diary["id"]).json()["data"]
        url = f"/api/diaries/{diary['id']}/comments/{comment['id']}/react"

        client.post(url, json={"emoji": Emoji.HEART.value}, headers=alice["headers"])
        response = client.post(
            url, json={"emoji": Emoji.CLAP.value}, headers=alice["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"]["reaction_summary"] == {Emoji.CLAP.value: 1}
        listing = client.get(
            f"/api/diaries/{diary['id']}/comments", headers=alice["headers"]
        )
        assert listing.json()["data"][0]["user_reaction"] == Emoji.CLAP.value
