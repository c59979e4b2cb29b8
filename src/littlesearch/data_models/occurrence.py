from pydantic import BaseModel, ConfigDict, PositiveInt


class Occurrence(BaseModel):
    """How many times one keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str  # document file name as listed in the docs file
    frequency: PositiveInt

    def bump(self) -> "Occurrence":
        return self.model_copy(update={"frequency": self.frequency + 1})

    def __str__(self) -> str:
        return f"({self.doc_id},{self.frequency})"
