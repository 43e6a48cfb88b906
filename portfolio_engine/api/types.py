"""Shared types for the Falcon portfolio API adapter.

``JsonPayload`` is the request/response dictionary shape exchanged with
resources.
"""

from __future__ import annotations

type JsonPayload = dict[str, object]
