from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...models.vocabulary import EXAMPLE_MAX_LENGTH, MEANING_MAX_LENGTH, WORD_MAX_LENGTH


class VocabularyItem(BaseModel):
    """One ``{word, meaning, example?}`` triple."""

    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True)

    word: str = Field(min_length=1, max_length=WORD_MAX_LENGTH)
    meaning: str = Field(min_length=1, max_length=MEANING_MAX_LENGTH)
    example: Optional[str] = Field(default=None, max_length=EXAMPLE_MAX_LENGTH)

    @field_validator('example', mode='before')
    @classmethod
    def _blank_example(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class VocabularyCreateRequest(VocabularyItem):
    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True, populate_by_name=True)

    collection_id: Optional[str] = Field(default=None, alias='collectionId')
    mastered: bool = False

    @field_validator('collection_id', mode='before')
    @classmethod
    def _blank_collection(cls, value):
        return value or None


class VocabularyUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True, populate_by_name=True)

    word: Optional[str] = Field(default=None, min_length=1, max_length=WORD_MAX_LENGTH)
    meaning: Optional[str] = Field(default=None, min_length=1, max_length=MEANING_MAX_LENGTH)
    example: Optional[str] = Field(default=None, max_length=EXAMPLE_MAX_LENGTH)
    collection_id: Optional[str] = Field(default=None, alias='collectionId')
    mastered: Optional[bool] = None

    @field_validator('example', 'collection_id', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ImportRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    vocabulary: List[VocabularyItem] = Field(min_length=1)
    collection_id: Optional[str] = Field(default=None, alias='collectionId')

    @field_validator('collection_id', mode='before')
    @classmethod
    def _blank_collection(cls, value):
        return value or None


class ImportPreviewRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    format: Literal['csv', 'json']
    content: str
