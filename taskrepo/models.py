from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """Immutable task record. Identity is the `id`; field changes produce new values."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    completed: bool = False

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    # ---- State transitions ----
    def as_completed(self) -> "Task":
        return self.model_copy(update={"completed": True})

    def as_active(self) -> "Task":
        return self.model_copy(update={"completed": False})

    # ---- Derived ----
    @property
    def is_active(self) -> bool:
        return not self.completed

