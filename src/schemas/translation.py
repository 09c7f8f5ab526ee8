"""Translation API schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TextTranslationRequest(BaseModel):
    text: str | None = Field(
        default=None,
        description="Text to translate; defaults to the document's content",
    )
    enforce_complete: bool = True

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class TextTranslationResponse(BaseModel):
    original_language: str = "English"
    target_language: str = "Hindi"
    translated_text: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TermTranslationRequest(BaseModel):
    """A term, a phrase, or a JSON encoded object/array of strings."""

    term: str = Field(..., min_length=1)
    use_ai: bool = Field(
        default=True,
        description="Use the language model; false uses the legal term dictionary",
    )

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class TermTranslationResponse(BaseModel):
    original_term: str
    translated_term: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
