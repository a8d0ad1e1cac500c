from functools import lru_cache
from core.service import ScheduleService


@lru_cache(maxsize=1)
def get_service() -> ScheduleService:
    """Process-wide roster service; override in tests with app.dependency_overrides."""
    return ScheduleService()
