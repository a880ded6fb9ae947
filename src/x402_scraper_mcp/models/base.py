"""Base model for payloads returned by the scraping API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr


class ApiPayload(BaseModel):
    """A JSON object received from the API.

    Unknown fields are allowed, and the original payload is kept so it can
    be handed back to MCP clients exactly as the API sent it.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]):
        """Validate a decoded JSON object and remember the original."""
        model = cls.model_validate(payload)
        model._raw = payload
        return model

    @property
    def raw(self) -> dict[str, Any]:
        """The JSON object this model was built from."""
        return self._raw
