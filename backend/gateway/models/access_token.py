from pydantic import BaseModel

class AccessToken(BaseModel):
    """Twitch OAuth client-credentials token response."""
    access_token: str
    token_type: str = ""
    expires_in: int = 0

    class Config:
        frozen = True
        extra = "ignore"
