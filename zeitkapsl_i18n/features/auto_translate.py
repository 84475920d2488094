"""Draft translations for keys a locale still takes from the reference locale."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import openai
from openai import AsyncOpenAI

from ..core.config import settings
from ..core.errors import AutoTranslateError
from ..core.i18n import I18N, REFERENCE_LOCALE, source_of
from ..core.values import Literal

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You translate user interface strings for a photo and video storage web app. "
    "Translate the text from {source} to {target}.\n"
    "• Reply with the translated text only, no quotes, no explanations\n"
    "• Keep HTML tags, attributes and entities exactly as they are\n"
    "• Keep leading and trailing whitespace\n"
    "• Use the informal form of address (du) for German"
)

_client: Optional[AsyncOpenAI] = None


def get_openai_client() -> AsyncOpenAI:
    """Get or create the OpenAI client instance."""
    global _client
    if _client is None:
        if not settings.OPENAI_API_KEY:
            raise AutoTranslateError("OPENAI_API_KEY not set in environment variables")
        _client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
    return _client


def keys_to_translate(locale: str) -> List[str]:
    """Reference literal keys that ``locale`` only gets from the reference locale.

    Templates and month lists carry placeholder and arity rules, so they are
    left for a human translator.
    """
    if locale == REFERENCE_LOCALE:
        return []
    return [
        key
        for key, value in I18N.own(REFERENCE_LOCALE).items()
        if isinstance(value, Literal) and source_of(locale, key) == REFERENCE_LOCALE
    ]


async def translate_text(client: Any, text: str, target: str, model: str) -> str:
    response = await client.chat.completions.create(
        model=model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT.format(source=REFERENCE_LOCALE, target=target)},
            {"role": "user", "content": text},
        ],
        temperature=0.2,
    )
    content = response.choices[0].message.content or ""
    if not content.strip():
        raise AutoTranslateError("empty response from the translation model")
    return content.strip("\n")


async def draft_missing(locale: str, client: Any = None, model: Optional[str] = None) -> Dict[str, str]:
    code = I18N.normalize(locale)
    if code is None:
        raise AutoTranslateError(f"unsupported locale {locale!r}")
    if code == REFERENCE_LOCALE:
        raise AutoTranslateError(f"{REFERENCE_LOCALE} is the source locale")

    keys = keys_to_translate(code)
    if not keys:
        log.info("Nothing to translate for %s", code)
        return {}

    client = client or get_openai_client()
    model = model or settings.OPENAI_MODEL
    reference = I18N.own(REFERENCE_LOCALE)

    drafts: Dict[str, str] = {}
    for key in keys:
        source = reference[key]
        log.info("Translating [%s] %s", code, key)
        try:
            drafts[key] = await translate_text(client, source.text, code, model)
        except (openai.OpenAIError, AutoTranslateError) as e:
            log.error("Error translating %s to %s: %s", key, code, e)
    log.info("Drafted %d of %d missing strings for %s", len(drafts), len(keys), code)
    return drafts


def write_draft(drafts: Dict[str, str], path: Union[str, Path]) -> Path:
    """Write drafts for review; the packaged locale resources are left untouched."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(dict(sorted(drafts.items())), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return out
