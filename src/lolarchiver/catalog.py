"""The operation catalog: one descriptor and one request builder per endpoint.

Each builder is a pure function from caller parameters to an
:class:`~lolarchiver.models.APIRequest`. Builders do not validate; the
commands check required and mutually-alternative options before calling
them.

The remote API does not place parameters consistently. The YouTube
endpoints take a JSON body; every other endpoint takes HTTP headers. The
placement below must match the server exactly, so each endpoint spells out
its own mapping instead of going through a generic builder.

Header conventions:

* optional parameters that were not supplied are left out entirely rather
  than sent as empty strings;
* boolean flags are sent as the literal ``"true"`` and only when set;
* integers are sent in decimal.
"""

from __future__ import annotations

from typing import Optional

from lolarchiver.models import APIRequest, BodyValue, Operation, ParamPlacement

_H = ParamPlacement.HEADERS
_B = ParamPlacement.BODY

CREDITS_LEFT = Operation(
    name="credits_left",
    path="/credits_left",
    summary="Remaining API credits",
)
YOUTUBE_USER_COMMENTS = Operation(
    name="youtube_user_comments",
    path="/youtube/user_all_comments",
    placement=_B,
    params=("user_id", "handle", "channel_id", "offset"),
    summary="All comments posted by a YouTube user",
)
YOUTUBE_COMMENT_REPLIES = Operation(
    name="youtube_comment_replies",
    path="/youtube/comment_replies",
    placement=_B,
    params=("comment_id",),
    summary="Replies to a YouTube comment",
)
REVERSE_PHONE_LOOKUP = Operation(
    name="reverse_phone_lookup",
    path="/reverse_phone_lookup",
    placement=_H,
    params=("phone", "insecuremode"),
    summary="Reverse phone number lookup",
)
REVERSE_EMAIL_LOOKUP = Operation(
    name="reverse_email_lookup",
    path="/reverse_email_lookup",
    placement=_H,
    params=("email", "insecuremode"),
    summary="Reverse email address lookup",
)
TWITTER_HISTORY_LOOKUP = Operation(
    name="twitter_history_lookup",
    path="/twitter_history_lookup",
    placement=_H,
    params=("handle", "id", "byold"),
    summary="Twitter/X username history",
)
DATABASE_LOOKUP = Operation(
    name="database_lookup",
    path="/database_lookup",
    placement=_H,
    params=("query", "exact"),
    summary="Free-text database search",
)
TWITCH_USER_MESSAGES = Operation(
    name="twitch_user_messages",
    path="/twitch/user_all_messages",
    placement=_H,
    params=("username", "server", "offset"),
    summary="All chat messages of a Twitch user",
)
TWITCH_USER_TIMEOUTS = Operation(
    name="twitch_user_timeouts",
    path="/twitch/user_all_timeouts",
    placement=_H,
    params=("username", "offset"),
    summary="Chat bans and timeouts of a Twitch user",
)
TWITCH_USER_HISTORY = Operation(
    name="twitch_user_history",
    path="/twitch/user_history",
    placement=_H,
    params=("username", "mode"),
    summary="Twitch account history",
)
TWITCH_FOLLOWAGE = Operation(
    name="twitch_followage",
    path="/twitch/followage",
    placement=_H,
    params=("username",),
    summary="Channels a Twitch user follows",
)
TWITCH_FOLLOWERS = Operation(
    name="twitch_followers",
    path="/twitch/followers",
    placement=_H,
    params=("username",),
    summary="Followers of a Twitch user",
)
KICK_USER_MESSAGES = Operation(
    name="kick_user_messages",
    path="/kick/user_all_messages",
    placement=_H,
    params=("username", "offset"),
    summary="All chat messages of a Kick user",
)
KICK_USER_TIMEOUTS = Operation(
    name="kick_user_timeouts",
    path="/kick/user_all_timeouts",
    placement=_H,
    params=("username",),
    summary="Chat bans and timeouts of a Kick user",
)
KICK_USER_MOD_CHANNELS = Operation(
    name="kick_user_mod_channels",
    path="/kick/user_channel_mods_in",
    placement=_H,
    params=("username",),
    summary="Kick channels where a user is a moderator",
)
KICK_USER_SUBSCRIBERS = Operation(
    name="kick_user_subscribers",
    path="/kick/user_subscribers_list",
    placement=_H,
    params=("username",),
    summary="Subscribers of a Kick user",
)

OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        CREDITS_LEFT,
        YOUTUBE_USER_COMMENTS,
        YOUTUBE_COMMENT_REPLIES,
        REVERSE_PHONE_LOOKUP,
        REVERSE_EMAIL_LOOKUP,
        TWITTER_HISTORY_LOOKUP,
        DATABASE_LOOKUP,
        TWITCH_USER_MESSAGES,
        TWITCH_USER_TIMEOUTS,
        TWITCH_USER_HISTORY,
        TWITCH_FOLLOWAGE,
        TWITCH_FOLLOWERS,
        KICK_USER_MESSAGES,
        KICK_USER_TIMEOUTS,
        KICK_USER_MOD_CHANNELS,
        KICK_USER_SUBSCRIBERS,
    )
}
"""Every operation keyed by name."""

TWITCH_SERVERS = ("superserver2", "main")
DEFAULT_TWITCH_SERVER = "superserver2"
TWITCH_HISTORY_MODES = ("username", "utype", "btype")

_TRUE = "true"


# --- Credits ---


def credits_left() -> APIRequest:
    return APIRequest(operation=CREDITS_LEFT)


# --- YouTube (JSON body) ---


def youtube_user_comments(
    user_id: Optional[str] = None,
    handle: Optional[str] = None,
    channel_id: Optional[str] = None,
    offset: int = 0,
) -> APIRequest:
    """Any subset of the three identifiers may be given; ``offset`` is always sent."""
    body: dict[str, BodyValue] = {"offset": offset}
    if user_id:
        body["user_id"] = user_id
    if handle:
        body["handle"] = handle
    if channel_id:
        body["channel_id"] = channel_id
    return APIRequest(operation=YOUTUBE_USER_COMMENTS, body=body)


def youtube_comment_replies(comment_id: str) -> APIRequest:
    return APIRequest(
        operation=YOUTUBE_COMMENT_REPLIES, body={"comment_id": comment_id}
    )


# --- Reverse lookups ---


def reverse_phone_lookup(phone: str, insecure_mode: bool = False) -> APIRequest:
    headers = {"phone": phone}
    if insecure_mode:
        headers["insecuremode"] = _TRUE
    return APIRequest(operation=REVERSE_PHONE_LOOKUP, headers=headers)


def reverse_email_lookup(email: str, insecure_mode: bool = False) -> APIRequest:
    headers = {"email": email}
    if insecure_mode:
        headers["insecuremode"] = _TRUE
    return APIRequest(operation=REVERSE_EMAIL_LOOKUP, headers=headers)


# --- Twitter ---


def twitter_history_lookup(
    handle: Optional[str] = None,
    user_id: Optional[int] = None,
    by_old: bool = False,
) -> APIRequest:
    """A numeric ID of ``0`` is treated as absent."""
    headers: dict[str, str] = {}
    if handle:
        headers["handle"] = handle
    if user_id:
        headers["id"] = str(user_id)
    if by_old:
        headers["byold"] = _TRUE
    return APIRequest(operation=TWITTER_HISTORY_LOOKUP, headers=headers)


# --- Database ---


def database_lookup(query: str, exact: bool = False) -> APIRequest:
    headers = {"query": query}
    if exact:
        headers["exact"] = _TRUE
    return APIRequest(operation=DATABASE_LOOKUP, headers=headers)


# --- Twitch ---


def twitch_user_messages(
    username: str,
    server: str = DEFAULT_TWITCH_SERVER,
    offset: int = 0,
) -> APIRequest:
    headers = {"username": username, "server": server, "offset": str(offset)}
    return APIRequest(operation=TWITCH_USER_MESSAGES, headers=headers)


def twitch_user_timeouts(username: str, offset: int = 0) -> APIRequest:
    headers = {"username": username, "offset": str(offset)}
    return APIRequest(operation=TWITCH_USER_TIMEOUTS, headers=headers)


def twitch_user_history(username: str, mode: Optional[str] = None) -> APIRequest:
    headers = {"username": username}
    if mode:
        headers["mode"] = mode
    return APIRequest(operation=TWITCH_USER_HISTORY, headers=headers)


def twitch_followage(username: str) -> APIRequest:
    return _username_request(TWITCH_FOLLOWAGE, username)


def twitch_followers(username: str) -> APIRequest:
    return _username_request(TWITCH_FOLLOWERS, username)


# --- Kick ---


def kick_user_messages(username: str, offset: int = 0) -> APIRequest:
    headers = {"username": username, "offset": str(offset)}
    return APIRequest(operation=KICK_USER_MESSAGES, headers=headers)


def kick_user_timeouts(username: str) -> APIRequest:
    return _username_request(KICK_USER_TIMEOUTS, username)


def kick_user_mod_channels(username: str) -> APIRequest:
    return _username_request(KICK_USER_MOD_CHANNELS, username)


def kick_user_subscribers(username: str) -> APIRequest:
    return _username_request(KICK_USER_SUBSCRIBERS, username)


def _username_request(operation: Operation, username: str) -> APIRequest:
    return APIRequest(operation=operation, headers={"username": username})
