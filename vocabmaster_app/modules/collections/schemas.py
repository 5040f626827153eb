from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

COLOR_PATTERN = r'^#[0-9A-Fa-f]{6}$'


class CollectionCreateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)


class CollectionUpdateRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=COLOR_PATTERN)
