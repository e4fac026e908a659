"""APIs of the customer support entities: FAQs and feedbacks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Union

from ..impl.options import create_entity, expand_url, id_url, to_json
from ..schemas.common import Id, State
from ..schemas.system import Faq, Feedback, FeedbackAction, FeedbackTrack
from ..utils.checks import ID_TYPES, check_argument_type
from .base import (
    AUDIT_CRITERIA,
    AddMixin,
    DeleteMixin,
    EraseMixin,
    ExportMixin,
    GetMixin,
    ImportMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
)

__all__ = ["FaqApi", "FeedbackApi"]


class FaqApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    UpdateStateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
    ExportMixin,
    ImportMixin,
):
    base_path = "/faq"
    entity_class = Faq
    criteria_definitions = (
        info_criteria("app", "category", "product")
        + define_criteria(question=str, answer=str, state=(State, str))
        + AUDIT_CRITERIA
    )


class FeedbackApi(ListMixin, GetMixin, AddMixin):
    """Feedbacks submitted by users and the tracks of their handling.

    Reads accept the ``transform_urls`` option for the attachment URLs.
    """

    base_path = "/feedback"
    entity_class = Feedback
    criteria_definitions = (
        info_criteria("app")
        + define_criteria(
            type=str,
            category=str,
            submitter_id=ID_TYPES,
            submitter_username=str,
            status=str,
        )
        + AUDIT_CRITERIA
    )
    option_definitions = define_criteria(transform_urls=bool)

    async def get_tracks(
        self, id: Id, show_loading: bool = True, **options: Any
    ) -> List[FeedbackTrack]:
        check_argument_type("show_loading", show_loading, bool)
        url = id_url(self._url("/{id}/track"), id)
        params = to_json(self._options(options))
        if show_loading:
            self.http.loading.show_getting()
        obj = await self.http.get(url, params=params)
        tracks = create_entity(List[FeedbackTrack], obj) or []
        self.logger.info("feedback.tracks_got", id=id, count=len(tracks))
        self.logger.debug("feedback.tracks", id=id, tracks=tracks)
        return tracks

    async def perform_action(
        self,
        id: Id,
        action: Union[FeedbackAction, str],
        track: Union[FeedbackTrack, Mapping[str, Any]],
        show_loading: bool = True,
    ) -> Optional[FeedbackTrack]:
        """Apply a handling action and return the track recording it."""

        check_argument_type("action", action, (FeedbackAction, str))
        check_argument_type("track", track, (FeedbackTrack, Mapping))
        check_argument_type("show_loading", show_loading, bool)
        url = expand_url(
            id_url(self._url("/{id}/action/{action}"), id), action=to_json(action)
        )
        if show_loading:
            self.http.loading.show_updating()
        obj = await self.http.put(url, json=to_json(track))
        result = create_entity(FeedbackTrack, obj)
        self.logger.info("feedback.action_performed", id=id, action=to_json(action))
        self.logger.debug("feedback.track", track=result)
        return result
