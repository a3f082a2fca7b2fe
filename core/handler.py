"""Request handling for the generate endpoint, independent of the hosting platform."""

from __future__ import annotations

import hmac
import json
import logging
import time
from collections.abc import Mapping
from typing import Any

from core.config import Settings
from core.errors import (
    AuthorizationError,
    ConfigurationError,
    UpstreamError,
    UpstreamStatusError,
    ValidationError,
)
from core.fallback import RandomSource, pick_fallback
from core.models import GenerationRequest, GenerationResult, HandlerResponse, MessageSource
from core.prompt_builder import build_prompt
from core.providers import GeminiProvider, TextProvider

logger = logging.getLogger(__name__)


def parse_body(body: bytes | str | Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Decode a request body into a JSON object. Empty bodies decode to {}."""
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return body
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            raise ValidationError("Request body must be UTF-8 encoded JSON.") from None
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        raise ValidationError("Request body is not valid JSON.") from None
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data


def check_secret(request: GenerationRequest, settings: Settings) -> None:
    if not settings.shared_secret:
        return
    provided = request.secret or ""
    if not hmac.compare_digest(provided.encode("utf-8"), settings.shared_secret.encode("utf-8")):
        raise AuthorizationError("Invalid secret code.")


def generate_message(
    request: GenerationRequest,
    provider: TextProvider,
    language: str = "bn",
    rng: RandomSource | None = None,
) -> GenerationResult:
    """Generate a message, substituting fallback text on any upstream failure."""
    prompt = build_prompt(request.kind, request.target_name, request.sender_name, language=language)
    start_time = time.time()
    try:
        text = provider.generate(prompt)
    except UpstreamError as exc:
        gen_time = time.time() - start_time
        if isinstance(exc, UpstreamStatusError):
            logger.warning(
                "Generation failed (%s, upstream HTTP %d) via %s; serving fallback",
                exc.kind, exc.upstream_status, provider.provider_name,
            )
        else:
            logger.warning(
                "Generation failed (%s) via %s: %s; serving fallback",
                exc.kind, provider.provider_name, exc,
            )
        message = pick_fallback(request.kind, request.target_name, rng=rng)
        return GenerationResult(
            message=message, source=MessageSource.FALLBACK, generation_time_s=round(gen_time, 2)
        )

    gen_time = time.time() - start_time
    return GenerationResult(message=text, source=MessageSource.GENERATED, generation_time_s=round(gen_time, 2))


def handle_generate(
    method: str | None,
    body: bytes | str | Mapping[str, Any] | None,
    *,
    settings: Settings,
    provider: TextProvider | None = None,
    rng: RandomSource | None = None,
) -> HandlerResponse:
    """Run one generate request through validation, authorization and generation.

    Hard failures (method, body, secret, configuration) become error
    responses. Upstream failures never do: they are replaced with a
    fallback message and a 200 response.
    """
    cors = {"access-control-allow-origin": settings.allowed_origin}
    verb = (method or "").upper()

    if verb == "OPTIONS":
        return HandlerResponse(
            status_code=204,
            body=None,
            headers={
                **cors,
                "access-control-allow-methods": "POST, OPTIONS",
                "access-control-allow-headers": "Content-Type",
            },
        )
    if verb != "POST":
        return HandlerResponse.error(405, "Method not allowed", {**cors, "allow": "POST"})

    try:
        request = GenerationRequest.from_payload(
            parse_body(body),
            default_target_name=settings.default_target_name,
            default_sender_name=settings.default_sender_name,
        )
        check_secret(request, settings)
        if provider is None:
            provider = GeminiProvider(
                api_key=settings.api_key,
                model=settings.model,
                timeout=settings.timeout_s,
            )
    except (ValidationError, AuthorizationError) as exc:
        logger.info("Rejected generate request: %s", exc)
        return HandlerResponse.error(exc.status_code, str(exc), cors)
    except ConfigurationError as exc:
        logger.error("Generate endpoint misconfigured: %s", exc)
        return HandlerResponse.error(exc.status_code, str(exc), cors)

    result = generate_message(request, provider, language=settings.language, rng=rng)
    logger.info(
        "Served message kind=%s source=%s len=%d in %.2fs",
        request.kind, result.source.value, len(result.message), result.generation_time_s,
    )
    return HandlerResponse(
        status_code=200,
        body=result.to_dict(),
        headers={**cors, "x-message-source": result.source.value},
    )
