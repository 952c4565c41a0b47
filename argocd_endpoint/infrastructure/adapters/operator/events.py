"""Kubernetes event recorder backed by kopf."""

from __future__ import annotations

from typing import TYPE_CHECKING

import kopf

if TYPE_CHECKING:
    from ....domain.entities import Endpoint


class KopfEventRecorder:
    """Posts events against the resource body of the current handler call."""

    def __init__(self, body: kopf.Body) -> None:
        self._body = body

    def normal(self, endpoint: Endpoint, reason: str, message: str) -> None:  # noqa: ARG002
        kopf.info(self._body, reason=reason, message=message)
