from __future__ import annotations

import pytest

from common_api.api import FaqApi, FeedbackApi
from common_api.exceptions import ArgumentTypeError, UnsupportedFieldError
from common_api.schemas import Faq, FeedbackAction, FeedbackTrack, State


@pytest.mark.asyncio
async def test_faq_crud_and_state(http, backend) -> None:
    api = FaqApi(http)
    backend.reply(json={"id": 3, "question": "How?", "answer": "So."})

    faq = await api.add(Faq(question="How?", answer="So."))
    await api.update_state(3, State.DISABLED)
    await api.erase(3)

    assert faq.id == 3
    assert [(r.method, r.url.path) for r in backend.requests] == [
        ("POST", "/api/faq"),
        ("PUT", "/api/faq/3/state"),
        ("DELETE", "/api/faq/3/erase"),
    ]


@pytest.mark.asyncio
async def test_faq_criteria(http, backend) -> None:
    await FaqApi(http).list(criteria={"product_code": "P1", "question": "pass"})

    assert backend.params == {"product_code": "P1", "question": "pass"}

    with pytest.raises(UnsupportedFieldError):
        await FaqApi(http).list(criteria={"submitter_id": 1})


@pytest.mark.asyncio
async def test_feedback_list_with_option(http, backend) -> None:
    await FeedbackApi(http).list(
        criteria={"submitter_username": "lilei", "status": "OPEN"}, transform_urls=True
    )

    assert backend.path == "/feedback"
    assert backend.params == {
        "submitter_username": "lilei",
        "status": "OPEN",
        "transform_urls": "true",
    }


@pytest.mark.asyncio
async def test_feedback_tracks(http, backend, loading) -> None:
    backend.reply(
        json=[
            {"id": 1, "feedback_id": 7, "action": "REPLY", "content": "Looking"},
            {"id": 2, "feedback_id": 7, "action": "CLOSE"},
        ]
    )

    tracks = await FeedbackApi(http).get_tracks(7, transform_urls=False)

    assert backend.path == "/feedback/7/track"
    assert backend.params == {"transform_urls": "false"}
    assert [track.action for track in tracks] == [FeedbackAction.REPLY, FeedbackAction.CLOSE]
    assert all(isinstance(track, FeedbackTrack) for track in tracks)
    assert loading.events == [("show", "Getting data..."), ("clear",)]


@pytest.mark.asyncio
async def test_feedback_without_tracks(http, backend) -> None:
    assert await FeedbackApi(http).get_tracks(7, show_loading=False) == []


@pytest.mark.asyncio
async def test_feedback_perform_action(http, backend) -> None:
    backend.reply(json={"id": 3, "feedback_id": 7, "action": "ACCEPT"})

    track = await FeedbackApi(http).perform_action(
        7, FeedbackAction.ACCEPT, {"content": "Will fix"}
    )

    assert backend.last.method == "PUT"
    assert backend.path == "/feedback/7/action/ACCEPT"
    assert backend.body == {"content": "Will fix"}
    assert track.action is FeedbackAction.ACCEPT


@pytest.mark.asyncio
async def test_feedback_action_type_is_checked(http, backend) -> None:
    with pytest.raises(ArgumentTypeError, match="'action'"):
        await FeedbackApi(http).perform_action(7, 1, {})

    assert backend.requests == []
