"""Testes do LineMessagingClient — mensagens, perfis, groups e rooms.

Cada operação deve emitir exatamente um request para o endpoint
correspondente e decodificar a resposta no modelo tipado.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import httpx
import pytest

from api.connectors.line import (
    InvalidArgumentError,
    InvalidCredentialError,
    LineMessagingClient,
    NotFoundError,
    PermissionDeniedError,
)
from app.domain.line import (
    BotApiResponse,
    Multicast,
    PushMessage,
    ReplyMessage,
    TextMessage,
    UserProfileResponse,
)
from tests.fakes.fake_line_http import RecordingHandler, error_response, json_response

MakeClient = Callable[..., tuple[LineMessagingClient, RecordingHandler]]


class TestReplyMessage:
    @pytest.mark.asyncio
    async def test_reply_posts_payload(self, make_client: MakeClient) -> None:
        client, recorder = make_client(lambda request: json_response({}))

        result = await client.reply_message(
            ReplyMessage(reply_token="rtok", messages=[TextMessage(text="Olá")])
        )

        assert isinstance(result, BotApiResponse)
        assert result.request_id == "req-abc"
        assert result.message == ""
        assert len(recorder.requests) == 1
        request = recorder.last
        assert request.method == "POST"
        assert str(request.url) == "https://api.line.me/v2/bot/message/reply"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == "application/json"
        assert recorder.last_json() == {
            "replyToken": "rtok",
            "messages": [{"type": "text", "text": "Olá"}],
        }

    @pytest.mark.asyncio
    async def test_expired_reply_token_is_invalid_credential(
        self,
        make_client: MakeClient,
    ) -> None:
        client, recorder = make_client(lambda request: error_response(400, "Invalid reply token"))

        with pytest.raises(InvalidCredentialError) as exc_info:
            await client.reply_message(
                ReplyMessage(reply_token="expired-token", messages=[TextMessage(text="oi")])
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.error_response is not None
        assert exc_info.value.error_response.message == "Invalid reply token"
        assert len(recorder.requests) == 1


class TestPushAndMulticast:
    @pytest.mark.asyncio
    async def test_push_message(self, make_client: MakeClient) -> None:
        client, recorder = make_client(lambda request: json_response({}))

        await client.push_message(PushMessage(to="U123", messages=[TextMessage(text="x")]))

        assert str(recorder.last.url) == "https://api.line.me/v2/bot/message/push"
        assert recorder.last_json()["to"] == "U123"

    @pytest.mark.asyncio
    async def test_push_plan_restriction(self, make_client: MakeClient) -> None:
        client, _ = make_client(
            lambda request: error_response(
                403, "Access to this API is not available for your account"
            )
        )

        with pytest.raises(PermissionDeniedError) as exc_info:
            await client.push_message(PushMessage(to="U1", messages=[TextMessage(text="x")]))

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_multicast(self, make_client: MakeClient) -> None:
        client, recorder = make_client(lambda request: json_response({}))

        await client.multicast(Multicast(to=["U1", "U2"], messages=[TextMessage(text="x")]))

        assert str(recorder.last.url) == "https://api.line.me/v2/bot/message/multicast"
        assert recorder.last_json()["to"] == ["U1", "U2"]

    @pytest.mark.asyncio
    async def test_multicast_with_group_id_is_rejected_remotely(
        self,
        make_client: MakeClient,
    ) -> None:
        """Nada é checado localmente: o request sai e a LINE recusa."""
        client, recorder = make_client(
            lambda request: error_response(400, "The request body has 1 error(s)")
        )

        with pytest.raises(InvalidArgumentError):
            await client.multicast(
                Multicast(to=["U1", "Cgroup"], messages=[TextMessage(text="x")])
            )

        assert len(recorder.requests) == 1


class TestMessageContent:
    @pytest.mark.asyncio
    async def test_downloads_from_data_host(self, make_client: MakeClient) -> None:
        client, recorder = make_client(
            lambda request: httpx.Response(
                200,
                content=b"\xff\xd8jpeg",
                headers={"Content-Type": "image/jpeg"},
            )
        )

        content = await client.get_message_content("325708")

        assert content.content == b"\xff\xd8jpeg"
        assert content.mime_type == "image/jpeg"
        assert content.length == 6
        assert recorder.last.method == "GET"
        assert str(recorder.last.url) == (
            "https://api-data.line.me/v2/bot/message/325708/content"
        )

    @pytest.mark.asyncio
    async def test_expired_content_is_not_found(self, make_client: MakeClient) -> None:
        client, _ = make_client(lambda request: error_response(404, "Not found"))

        with pytest.raises(NotFoundError):
            await client.get_message_content("expired")


class TestProfiles:
    @pytest.mark.asyncio
    async def test_get_profile_decodes_camel_case(self, make_client: MakeClient) -> None:
        client, recorder = make_client(
            lambda request: json_response(
                {
                    "displayName": "LINE taro",
                    "userId": "U4af4980629",
                    "pictureUrl": "https://obs.line-apps.com/p",
                    "statusMessage": "Hello, LINE!",
                    "language": "ja",
                }
            )
        )

        profile = await client.get_profile("U4af4980629")

        assert profile == UserProfileResponse(
            display_name="LINE taro",
            user_id="U4af4980629",
            picture_url="https://obs.line-apps.com/p",
            status_message="Hello, LINE!",
        )
        assert str(recorder.last.url) == "https://api.line.me/v2/bot/profile/U4af4980629"

    @pytest.mark.asyncio
    async def test_ids_are_url_quoted_not_validated(self, make_client: MakeClient) -> None:
        client, recorder = make_client(
            lambda request: json_response({"displayName": "x", "userId": "a/b"})
        )

        await client.get_profile("a/b")

        assert recorder.last.url.raw_path == b"/v2/bot/profile/a%2Fb"

    @pytest.mark.asyncio
    async def test_group_member_profile(self, make_client: MakeClient) -> None:
        client, recorder = make_client(
            lambda request: json_response({"displayName": "x", "userId": "U1"})
        )

        profile = await client.get_group_member_profile("G1", "U1")

        assert profile.picture_url is None
        assert str(recorder.last.url) == "https://api.line.me/v2/bot/group/G1/member/U1"

    @pytest.mark.asyncio
    async def test_room_member_profile_user_left(self, make_client: MakeClient) -> None:
        client, recorder = make_client(lambda request: error_response(404, "Not found"))

        with pytest.raises(NotFoundError):
            await client.get_room_member_profile("R1", "U1")

        assert str(recorder.last.url) == "https://api.line.me/v2/bot/room/R1/member/U1"


class TestGroupsAndRooms:
    @pytest.mark.asyncio
    async def test_first_page_has_no_start_param(self, make_client: MakeClient) -> None:
        client, recorder = make_client(
            lambda request: json_response({"memberIds": ["U1", "U2"], "next": "TOKEN2"})
        )

        page = await client.get_group_members_ids("G1")

        assert page.member_ids == ["U1", "U2"]
        assert page.next == "TOKEN2"
        assert recorder.last.url.params.get("start") is None
        assert recorder.last.url.path == "/v2/bot/group/G1/members/ids"

    @pytest.mark.asyncio
    async def test_continuation_token_is_sent(self, make_client: MakeClient) -> None:
        client, recorder = make_client(lambda request: json_response({"memberIds": ["U3"]}))

        page = await client.get_room_members_ids("R1", start="TOKEN2")

        assert page.next is None
        assert recorder.last.url.params["start"] == "TOKEN2"
        assert recorder.last.url.path == "/v2/bot/room/R1/members/ids"

    @pytest.mark.asyncio
    async def test_invalid_group_id(self, make_client: MakeClient) -> None:
        client, _ = make_client(lambda request: error_response(404, "Not found"))

        with pytest.raises(NotFoundError):
            await client.get_group_members_ids("nope")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("operation", "target", "path"),
        [
            ("leave_group", "G1", "/v2/bot/group/G1/leave"),
            ("leave_room", "R1", "/v2/bot/room/R1/leave"),
        ],
    )
    async def test_leave(
        self,
        make_client: MakeClient,
        operation: str,
        target: str,
        path: str,
    ) -> None:
        client, recorder = make_client(lambda request: json_response({}))

        result = await getattr(client, operation)(target)

        assert isinstance(result, BotApiResponse)
        assert recorder.last.method == "POST"
        assert recorder.last.url.path == path
        assert recorder.last.content == b""


class TestConcurrency:
    @pytest.mark.asyncio
    async def test_concurrent_calls_are_correlated(self, make_client: MakeClient) -> None:
        """Respostas fora de ordem ainda chegam à chamada de origem."""

        async def handler(request: httpx.Request) -> httpx.Response:
            user_id = request.url.path.rsplit("/", 1)[-1]
            # Ids menores respondem por último
            await asyncio.sleep(0.001 * (10 - int(user_id[1:])))
            return json_response({"displayName": f"name-{user_id}", "userId": user_id})

        client, recorder = make_client(handler)
        user_ids = [f"U{i}" for i in range(10)]

        profiles = await asyncio.gather(*(client.get_profile(uid) for uid in user_ids))

        assert [p.user_id for p in profiles] == user_ids
        assert [p.display_name for p in profiles] == [f"name-{uid}" for uid in user_ids]
        assert len(recorder.requests) == 10

    @pytest.mark.asyncio
    async def test_failure_does_not_affect_siblings(self, make_client: MakeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/missing"):
                return error_response(404, "Not found")
            return json_response({"displayName": "ok", "userId": "U1"})

        client, _ = make_client(handler)

        results = await asyncio.gather(
            client.get_profile("U1"),
            client.get_profile("missing"),
            return_exceptions=True,
        )

        assert isinstance(results[0], UserProfileResponse)
        assert isinstance(results[1], NotFoundError)
