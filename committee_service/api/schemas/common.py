from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from committee_service.core.validation import MAX_DB_INT


# Integer path segment that fits an INTEGER column
PathInt = Annotated[int, Path(le=MAX_DB_INT)]


class CamelModel(BaseModel):
    """Request body with camelCase JSON keys (snake_case also accepted)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str = "Success"
