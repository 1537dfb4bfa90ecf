"""Conversion API routes."""
from __future__ import annotations
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
import structlog
from ...converter import to_words
from ...errors import InvalidNumberError, MagnitudeOverflowError, UnsupportedLanguageError
from ...languages.registry import PROFILES, supported_languages
from ...models.profile import ConversionOptions, Gender

logger = structlog.get_logger(__name__)

router = APIRouter()


class ConvertRequest(BaseModel):
    # Strings keep every digit; JSON floats are limited to double precision
    value: str | int | float
    lang: str | None = None
    gender: Gender = Gender.MASCULINE
    drop_spaces: bool = False


@router.get("/languages")
async def list_languages():
    """List every supported language code with its native name."""
    return {
        "languages": [
            {"code": code, "name": PROFILES[code].name}
            for code in supported_languages()
        ],
    }


@router.post("/convert")
async def convert(body: ConvertRequest, request: Request):
    """Spell out a number.

    The language defaults to the service's configured default; numbers beyond
    the language's largest scale word follow the configured overflow policy.
    """
    settings = request.app.state.settings
    if len(str(body.value)) > settings.max_input_length:
        raise HTTPException(
            status_code=422,
            detail=f"Value longer than {settings.max_input_length} characters",
        )

    lang = body.lang or settings.default_lang
    options = ConversionOptions(
        lang=lang,
        gender=body.gender,
        drop_spaces=body.drop_spaces,
        overflow=settings.overflow_policy,
    )
    try:
        words = to_words(body.value, options)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (InvalidNumberError, MagnitudeOverflowError) as e:
        logger.info("conversion_rejected", lang=lang, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))

    return {"value": str(body.value), "lang": lang, "words": words}
