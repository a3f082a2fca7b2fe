"""Serverless entrypoint for the love note generator.

Accepts either an event mapping (``httpMethod``/``method`` and ``body``, as
passed by Netlify and AWS Lambda style runtimes) or a request object with
``method`` and ``body`` attributes, and returns a
``{statusCode, headers, body}`` mapping.
"""

from __future__ import annotations

import base64
import binascii
import logging
import sys
from pathlib import Path
from typing import Any

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import load_settings
from core.errors import ConfigurationError, ValidationError
from core.handler import handle_generate
from core.models import HandlerResponse

logger = logging.getLogger(__name__)


def _unpack(request: Any) -> tuple[str | None, Any]:
    if isinstance(request, dict):
        method = request.get("httpMethod") or request.get("method")
        body = request.get("body")
        if body and request.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True)
            except (binascii.Error, ValueError):
                raise ValidationError("Request body is not valid base64.") from None
        return method, body
    return getattr(request, "method", None), getattr(request, "body", None)


def handler(request):
    """Serverless function handler for POST /api/generate."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return HandlerResponse.error(500, str(exc)).to_dict()

    logging.basicConfig(level=settings.log_level)

    cors = {"access-control-allow-origin": settings.allowed_origin}
    try:
        method, body = _unpack(request)
    except ValidationError as exc:
        logger.info("Rejected generate request: %s", exc)
        return HandlerResponse.error(exc.status_code, str(exc), cors).to_dict()

    try:
        response = handle_generate(method, body, settings=settings)
    except Exception:
        logger.exception("Unhandled error in generate handler")
        response = HandlerResponse.error(500, "Internal server error.", cors)
    return response.to_dict()
