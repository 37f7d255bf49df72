"""Tests for the operation catalog."""

from __future__ import annotations

import pytest

from lolarchiver import catalog
from lolarchiver.models import HTTPMethod, ParamPlacement


EXPECTED_PATHS = {
    "credits_left": "/credits_left",
    "youtube_user_comments": "/youtube/user_all_comments",
    "youtube_comment_replies": "/youtube/comment_replies",
    "reverse_phone_lookup": "/reverse_phone_lookup",
    "reverse_email_lookup": "/reverse_email_lookup",
    "twitter_history_lookup": "/twitter_history_lookup",
    "database_lookup": "/database_lookup",
    "twitch_user_messages": "/twitch/user_all_messages",
    "twitch_user_timeouts": "/twitch/user_all_timeouts",
    "twitch_user_history": "/twitch/user_history",
    "twitch_followage": "/twitch/followage",
    "twitch_followers": "/twitch/followers",
    "kick_user_messages": "/kick/user_all_messages",
    "kick_user_timeouts": "/kick/user_all_timeouts",
    "kick_user_mod_channels": "/kick/user_channel_mods_in",
    "kick_user_subscribers": "/kick/user_subscribers_list",
}


class TestOperationTable:
    def test_every_endpoint_is_registered(self) -> None:
        assert {name: op.path for name, op in catalog.OPERATIONS.items()} == EXPECTED_PATHS

    def test_all_operations_use_post(self) -> None:
        assert all(op.method == HTTPMethod.POST for op in catalog.OPERATIONS.values())

    def test_body_placement_only_for_youtube(self) -> None:
        body_ops = {
            name
            for name, op in catalog.OPERATIONS.items()
            if op.placement == ParamPlacement.BODY
        }
        assert body_ops == {"youtube_user_comments", "youtube_comment_replies"}

    def test_credits_has_no_params(self) -> None:
        assert catalog.CREDITS_LEFT.placement == ParamPlacement.NONE
        assert catalog.CREDITS_LEFT.params == ()

    @pytest.mark.parametrize(
        "request_",
        [
            catalog.credits_left(),
            catalog.youtube_user_comments(user_id="u", handle="@h", channel_id="c", offset=5),
            catalog.youtube_comment_replies("c1"),
            catalog.reverse_phone_lookup("555", insecure_mode=True),
            catalog.reverse_email_lookup("a@b.c", insecure_mode=True),
            catalog.twitter_history_lookup(handle="h", user_id=7, by_old=True),
            catalog.database_lookup("q", exact=True),
            catalog.twitch_user_messages("u", server="main", offset=3),
            catalog.twitch_user_timeouts("u", offset=3),
            catalog.twitch_user_history("u", mode="btype"),
            catalog.twitch_followage("u"),
            catalog.twitch_followers("u"),
            catalog.kick_user_messages("u", offset=3),
            catalog.kick_user_timeouts("u"),
            catalog.kick_user_mod_channels("u"),
            catalog.kick_user_subscribers("u"),
        ],
        ids=lambda r: r.operation.name,
    )
    def test_builders_match_declared_params(self, request_) -> None:
        op = request_.operation
        emitted = request_.body if op.placement is ParamPlacement.BODY else request_.headers
        other = request_.headers if op.placement is ParamPlacement.BODY else request_.body
        assert set(emitted) == set(op.params)
        assert other == {}

    def test_operations_are_immutable(self) -> None:
        with pytest.raises(Exception):
            catalog.CREDITS_LEFT.path = "/elsewhere"  # type: ignore[misc]


class TestCredits:
    def test_empty_request(self) -> None:
        request = catalog.credits_left()
        assert request.path == "/credits_left"
        assert request.method == "POST"
        assert request.headers == {}
        assert request.body == {}


class TestYouTube:
    def test_comments_only_given_identifiers(self) -> None:
        request = catalog.youtube_user_comments(handle="@someone")
        assert request.headers == {}
        assert request.body == {"offset": 0, "handle": "@someone"}

    def test_comments_all_identifiers_and_offset(self) -> None:
        request = catalog.youtube_user_comments(
            user_id="u1", handle="@h", channel_id="UC1", offset=50
        )
        assert request.body == {
            "offset": 50,
            "user_id": "u1",
            "handle": "@h",
            "channel_id": "UC1",
        }

    def test_offset_stays_an_integer(self) -> None:
        request = catalog.youtube_user_comments(user_id="u1", offset=7)
        assert request.body["offset"] == 7
        assert isinstance(request.body["offset"], int)

    def test_replies(self) -> None:
        request = catalog.youtube_comment_replies("Ugx123")
        assert request.path == "/youtube/comment_replies"
        assert request.body == {"comment_id": "Ugx123"}
        assert request.headers == {}


class TestReverseLookups:
    def test_phone_without_insecure(self) -> None:
        request = catalog.reverse_phone_lookup("5551234")
        assert request.headers == {"phone": "5551234"}
        assert request.body == {}

    def test_phone_insecure(self) -> None:
        request = catalog.reverse_phone_lookup("5551234", insecure_mode=True)
        assert request.headers == {"phone": "5551234", "insecuremode": "true"}

    def test_email(self) -> None:
        assert catalog.reverse_email_lookup("a@b.c").headers == {"email": "a@b.c"}

    def test_email_insecure(self) -> None:
        request = catalog.reverse_email_lookup("a@b.c", insecure_mode=True)
        assert request.headers == {"email": "a@b.c", "insecuremode": "true"}


class TestTwitter:
    def test_handle_only(self) -> None:
        assert catalog.twitter_history_lookup(handle="jack").headers == {"handle": "jack"}

    def test_id_only(self) -> None:
        assert catalog.twitter_history_lookup(user_id=12).headers == {"id": "12"}

    def test_zero_id_is_omitted(self) -> None:
        request = catalog.twitter_history_lookup(handle="jack", user_id=0)
        assert "id" not in request.headers

    def test_by_old(self) -> None:
        request = catalog.twitter_history_lookup(handle="jack", user_id=5, by_old=True)
        assert request.headers == {"handle": "jack", "id": "5", "byold": "true"}


class TestDatabase:
    def test_query(self) -> None:
        assert catalog.database_lookup("jane doe").headers == {"query": "jane doe"}

    def test_exact(self) -> None:
        request = catalog.database_lookup("jane doe", exact=True)
        assert request.headers == {"query": "jane doe", "exact": "true"}


class TestTwitch:
    def test_messages_defaults(self) -> None:
        request = catalog.twitch_user_messages("streamer")
        assert request.headers == {
            "username": "streamer",
            "server": "superserver2",
            "offset": "0",
        }

    def test_messages_custom(self) -> None:
        request = catalog.twitch_user_messages("streamer", server="main", offset=200)
        assert request.headers["server"] == "main"
        assert request.headers["offset"] == "200"

    def test_timeouts(self) -> None:
        request = catalog.twitch_user_timeouts("streamer", offset=3)
        assert request.headers == {"username": "streamer", "offset": "3"}

    def test_history_without_mode(self) -> None:
        assert catalog.twitch_user_history("streamer").headers == {"username": "streamer"}

    def test_history_with_mode(self) -> None:
        request = catalog.twitch_user_history("streamer", mode="utype")
        assert request.headers == {"username": "streamer", "mode": "utype"}

    @pytest.mark.parametrize(
        ("builder", "path"),
        [
            (catalog.twitch_followage, "/twitch/followage"),
            (catalog.twitch_followers, "/twitch/followers"),
        ],
    )
    def test_username_only(self, builder, path: str) -> None:
        request = builder("streamer")
        assert request.path == path
        assert request.headers == {"username": "streamer"}


class TestKick:
    def test_messages(self) -> None:
        request = catalog.kick_user_messages("kicker", offset=10)
        assert request.headers == {"username": "kicker", "offset": "10"}

    @pytest.mark.parametrize(
        ("builder", "path"),
        [
            (catalog.kick_user_timeouts, "/kick/user_all_timeouts"),
            (catalog.kick_user_mod_channels, "/kick/user_channel_mods_in"),
            (catalog.kick_user_subscribers, "/kick/user_subscribers_list"),
        ],
    )
    def test_username_only(self, builder, path: str) -> None:
        request = builder("kicker")
        assert request.path == path
        assert request.headers == {"username": "kicker"}


class TestPurity:
    def test_same_inputs_give_equal_requests(self) -> None:
        first = catalog.twitch_user_messages("streamer", offset=5)
        second = catalog.twitch_user_messages("streamer", offset=5)
        assert first == second
        assert first is not second
