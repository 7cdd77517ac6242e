from pydantic import BaseModel


class BatchStats(BaseModel):
    total: int = 0
    processed: int = 0
    with_phone: int = 0
    with_email: int = 0
    errors: int = 0

    @property
    def progress(self) -> int:
        """Completion percentage, rounded."""
        if not self.total:
            return 0
        return round(self.processed / self.total * 100)
