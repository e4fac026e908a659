"""APIs of uploaded files, the attachments referring to them and raw file access."""

from __future__ import annotations

from typing import Any, Optional

from ..impl import update_property_impl
from ..impl.import_impl import ImportSource, check_source_argument, read_source
from ..impl.options import create_entity, to_json
from ..schemas.common import DownloadResult, Id, State
from ..schemas.person import Attachment, Upload
from ..utils.checks import ID_TYPES, check_argument_type
from .base import (
    AUDIT_CRITERIA,
    AddMixin,
    BaseApi,
    DeleteMixin,
    EraseMixin,
    GetMixin,
    ListMixin,
    PurgeMixin,
    RestoreMixin,
    UpdateMixin,
    UpdateStateMixin,
    define_criteria,
    info_criteria,
)

__all__ = ["AttachmentApi", "UploadApi", "FileApi"]


class AttachmentApi(
    ListMixin,
    GetMixin,
    AddMixin,
    UpdateMixin,
    UpdateStateMixin,
    DeleteMixin,
    RestoreMixin,
    PurgeMixin,
    EraseMixin,
):
    base_path = "/attachment"
    entity_class = Attachment
    criteria_definitions = (
        define_criteria(
            owner_type=str, owner_id=ID_TYPES, owner_property=str, type=str
        )
        + info_criteria("category")
        + define_criteria(
            title=str,
            upload_id=ID_TYPES,
            state=(State, str),
            visible=bool,
            transform_urls=bool,
        )
        + AUDIT_CRITERIA
    )

    async def update_visible(self, id: Id, visible: bool, show_loading: bool = True) -> Any:
        return await update_property_impl(
            self, self._url("/{id}/visible"), id, "visible", bool, visible, show_loading
        )


class UploadApi(ListMixin, GetMixin, DeleteMixin, RestoreMixin, PurgeMixin):
    base_path = "/upload"
    entity_class = Upload
    criteria_definitions = define_criteria(type=str) + AUDIT_CRITERIA


class FileApi(BaseApi):
    """Upload and download of raw files stored by the backend."""

    async def upload(
        self,
        file: ImportSource,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
        show_loading: bool = True,
    ) -> Optional[Upload]:
        """Upload ``file`` and return the record of the stored upload.

        ``filename`` defaults to the name of the uploaded path or file object.
        """

        check_source_argument("file", file)
        check_argument_type("filename", filename, str, nullable=True)
        check_argument_type("content_type", content_type, str, nullable=True)
        check_argument_type("show_loading", show_loading, bool)
        name, content = read_source(file, filename or "upload")
        data = {"filename": filename or name}
        if content_type:
            data["contentType"] = content_type
        if show_loading:
            self.http.loading.show_uploading()
        obj = await self.http.post(
            "/file/upload",
            data=data,
            files={"file": (data["filename"], content, content_type)},
        )
        result = create_entity(Upload, obj)
        self.logger.info("file.uploaded", filename=data["filename"], size=len(content))
        self.logger.debug("file.upload", upload=result)
        return result

    async def download(
        self,
        path: str,
        mime_type: Optional[str] = None,
        filename: Optional[str] = None,
        show_loading: bool = True,
    ) -> DownloadResult:
        check_argument_type("path", path, str)
        check_argument_type("mime_type", mime_type, str, nullable=True)
        check_argument_type("filename", filename, str, nullable=True)
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_downloading()
        result = await self.http.download(
            "/file/download",
            params=to_json({"path": path}),
            mime_type=mime_type,
            filename=filename,
        )
        self.logger.info(
            "file.downloaded", path=path, filename=result.filename, size=result.size
        )
        return result

    async def _get_string(
        self, url: str, path: str, event: str, show_loading: bool
    ) -> str:
        check_argument_type("path", path, str)
        check_argument_type("show_loading", show_loading, bool)
        if show_loading:
            self.http.loading.show_getting()
        response = await self.http.get(url, params=to_json({"path": path}))
        result = str(response)
        self.logger.info(event, path=path)
        self.logger.debug(event, path=path, result=result)
        return result

    async def get_download_url(self, path: str, show_loading: bool = True) -> str:
        return await self._get_string(
            "/file/download/url", path, "file.download_url_got", show_loading
        )

    async def get_base64(self, path: str, show_loading: bool = True) -> str:
        """Return the content of the file encoded in BASE-64."""

        return await self._get_string("/file/base64", path, "file.base64_got", show_loading)

    async def get_base64_data_url(
        self, path: str, show_loading: bool = True
    ) -> str:
        return await self._get_string(
            "/file/base64/url", path, "file.base64_data_url_got", show_loading
        )
