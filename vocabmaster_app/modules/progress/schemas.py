from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class QuizResultRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    mode: Literal['quiz', 'flashcard', 'spelling']
    total_questions: int = Field(alias='totalQuestions', ge=1)
    correct_answers: int = Field(alias='correctAnswers', ge=0)
    score: float = Field(ge=0, le=100)
    collection_id: Optional[str] = Field(default=None, alias='collectionId')

    @field_validator('collection_id', mode='before')
    @classmethod
    def _blank_collection(cls, value):
        return value or None

    @model_validator(mode='after')
    def _check_counts(self):
        if self.correct_answers > self.total_questions:
            raise ValueError('correctAnswers cannot exceed totalQuestions')
        return self
