from pydantic import BaseModel, ConfigDict, computed_field


class CacheStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    capacity: int
    size: int
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total
