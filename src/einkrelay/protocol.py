#!/usr/bin/env python3
"""
Wire format of the distribution API.

Readers poll GET /api/content and receive ContentResponse; editors replace
the document with POST /api/content carrying SetTextPayload. Poll responses
must never be cached anywhere between the server and the reader, otherwise
a reader keeps comparing a stale fingerprint.
"""
from pydantic import BaseModel

BOOTSTRAP_PATH: str = "/get"
CONTENT_PATH: str = "/api/content"

# Headers that forbid any browser or proxy caching.
NO_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

UPDATE_OK_MESSAGE: str = "Content updated successfully."
UPDATE_FAILED_MESSAGE: str = "Failed to update content due to a server error."

ERROR_HTML: str = (
    "<h2>Server error</h2>"
    "<p>Could not access the document. Try restarting the application.</p>"
)


class ContentResponse(BaseModel):
    """Rendered document and its fingerprint."""

    html: str
    hash: str


class SetTextPayload(BaseModel):
    """Replacement document text."""

    new_text: str
