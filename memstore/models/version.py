from pydantic import BaseModel, ConfigDict


class Version(BaseModel):
    """One recorded value of a key at a timestamp."""

    model_config = ConfigDict(frozen=True)

    timestamp: int
    value: str
