"""Prompt builder that turns a kind and two names into a generation prompt."""

from __future__ import annotations

import logging

from core.models import Kind
from prompts.templates import DEFAULT_LANGUAGE, PROMPT_TEMPLATES

logger = logging.getLogger(__name__)


def build_prompt(
    kind: str | None,
    target_name: str,
    sender_name: str,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """Build a generation prompt for the given kind.

    Unrecognized kinds use the poem template; unrecognized languages use
    the default language.
    """
    templates = PROMPT_TEMPLATES.get(language, PROMPT_TEMPLATES[DEFAULT_LANGUAGE])
    parsed = Kind.parse(kind) or Kind.POEM
    template = templates[parsed.value]

    prompt = template.substitute(target_name=target_name, sender_name=sender_name)
    logger.debug("Built %s prompt (lang=%s): %s", parsed.value, language, prompt)
    return prompt
