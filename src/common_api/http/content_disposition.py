"""Filename extraction from ``Content-Disposition`` headers."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import unquote

_FILENAME_PATTERN = re.compile(r"filename\*=(?:UTF-8'')?([^;]+)|filename=\"([^\"]+)\"")


def extract_content_disposition_filename(header: Optional[str]) -> Optional[str]:
    """Return the filename announced by ``header``, or ``None``.

    The RFC 5987 ``filename*`` form is URL-decoded; the quoted ``filename``
    form is returned as is.
    """

    if not header:
        return None
    match = _FILENAME_PATTERN.search(header)
    if match is None:
        return None
    encoded, quoted = match.groups()
    if encoded:
        return unquote(encoded)
    return quoted
