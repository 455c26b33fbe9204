from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class TokenPayload(BaseModel):
    """Claims carried by a login token"""
    sub: str
    iat: Optional[datetime] = None
    exp: datetime

class LoginRequest(BaseModel):
    """Credentials sent to /login"""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")
