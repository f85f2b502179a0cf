from pydantic import BaseModel, Field
from typing import Optional


class CreateUserRequest(BaseModel):
    devicetype: str = Field(..., min_length=1, max_length=40)
    # None lets the bridge generate a username
    username: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
