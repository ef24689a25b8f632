# vaultkeep/app/schemas/user.py
from pydantic import BaseModel
from typing import Optional


# Claims we read from the bearer token
class TokenPayload(BaseModel):
    sub: Optional[str] = None


# Resolved caller of a vault request
class CallerIdentity(BaseModel):
    account_id: int

    model_config = {"frozen": True}
