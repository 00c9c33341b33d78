"""Chain message input and decoded protocol event."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from dataswap_sync.models._base import DataswapBaseModel


class RawMessage(DataswapBaseModel):
    """A transaction already parsed by an external chain-message parser.

    Only ``method`` and ``params`` are required; the envelope fields are
    carried through to the decoded event when the parser provides them.
    """

    method: str
    params: dict[str, Any] = Field(default_factory=dict)
    cid: str | None = None
    from_address: str | None = Field(default=None, validation_alias=AliasChoices("from", "fromAddress", "from_address"))
    to_address: str | None = Field(default=None, validation_alias=AliasChoices("to", "toAddress", "to_address"))
    height: int | None = None

    @field_validator("method", mode="before")
    @classmethod
    def _strip_method(cls, value: Any) -> str:
        return str(value).strip() if value is not None else ""

    @field_validator("params", mode="before")
    @classmethod
    def _params_or_empty(cls, value: Any) -> dict[str, Any]:
        return dict(value) if value else {}


class ProtocolEvent(DataswapBaseModel):
    """A classified Dataswap message.

    ``dataset_id`` / ``matching_id`` are lifted out of ``params`` for the
    methods that concern a specific dataset or matching, and stay ``None``
    otherwise.
    """

    method: str
    params: dict[str, Any] = Field(default_factory=dict)
    contract: str = ""
    dataset_id: int | None = None
    matching_id: int | None = None
    cid: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    height: int | None = None
