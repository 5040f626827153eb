from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StartSessionRequest(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    mode: Literal['quiz', 'flashcard', 'spelling']
    collection_id: Optional[str] = Field(default=None, alias='collectionId')

    @field_validator('collection_id', mode='before')
    @classmethod
    def _blank_collection(cls, value):
        return value or None


class ActionPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    type: Literal['select', 'next', 'previous', 'toggle_learned', 'complete', 'hint', 'check', 'restart']
    index: Optional[int] = None
    guess: Optional[str] = None


class SessionActionRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    session: Dict[str, Any]
    action: ActionPayload
