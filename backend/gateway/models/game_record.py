from pydantic import BaseModel

class GameRecord(BaseModel):
    id: int
    # IGDB omits fields a game has no value for; those go out as ""/0
    name: str = ""
    first_release_date: int = 0  # unix seconds
    summary: str = ""

    class Config:
        frozen = True            # immutable once received
        extra = "ignore"         # IGDB may add fields we did not ask for
