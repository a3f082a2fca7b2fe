"""Data models for the love note generator."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from core.config import MAX_NAME_LENGTH
from core.errors import ValidationError


class Kind(str, Enum):
    POEM = "poem"
    SHAYARI = "shayari"
    MESSAGE = "message"
    COMPLIMENT = "compliment"

    @classmethod
    def parse(cls, value: str | None) -> Kind | None:
        """Return the matching kind, or None when the value is not recognized."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class MessageSource(str, Enum):
    GENERATED = "generated"
    FALLBACK = "fallback"


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string.")
    return value.strip() or None


def _name(payload: Mapping[str, Any], key: str, default: str) -> str:
    value = _optional_str(payload, key) or default
    if len(value) > MAX_NAME_LENGTH:
        raise ValidationError(f"Field '{key}' must be at most {MAX_NAME_LENGTH} characters.")
    return value


@dataclass
class GenerationRequest:
    kind: str = Kind.POEM.value
    target_name: str = "Shrabani"
    sender_name: str = "Tarunjit"
    secret: str | None = None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        default_target_name: str = "Shrabani",
        default_sender_name: str = "Tarunjit",
    ) -> GenerationRequest:
        """Build a request from a decoded JSON body, applying defaults for missing fields.

        An unrecognized kind is kept verbatim so the fallback table can route
        it to the generic list.
        """
        kind = _optional_str(payload, "kind") or Kind.POEM.value
        parsed = Kind.parse(kind)
        return cls(
            kind=parsed.value if parsed else kind,
            target_name=_name(payload, "targetName", default_target_name),
            sender_name=_name(payload, "senderName", default_sender_name),
            secret=payload.get("secret") if isinstance(payload.get("secret"), str) else None,
        )


@dataclass
class GenerationResult:
    message: str
    source: MessageSource = MessageSource.GENERATED
    generation_time_s: float = 0.0

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


@dataclass
class HandlerResponse:
    status_code: int
    body: dict[str, Any] | None
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def error(cls, status_code: int, message: str, headers: dict[str, str] | None = None) -> HandlerResponse:
        return cls(status_code=status_code, body={"error": message}, headers=dict(headers or {}))

    def to_dict(self) -> dict[str, Any]:
        """Serverless-style response mapping with a JSON-encoded body."""
        headers = {"content-type": "application/json; charset=utf-8"}
        headers.update(self.headers)
        return {
            "statusCode": self.status_code,
            "headers": headers,
            "body": json.dumps(self.body, ensure_ascii=False) if self.body is not None else "",
        }
