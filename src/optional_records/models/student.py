from pydantic import BaseModel, ConfigDict, Field


class Student(BaseModel):
    """A named record with an age. Looked up by name, ignoring case."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    name: str = Field(..., min_length=1, description="Display name, used as lookup key.")
    age: int = Field(..., ge=0, description="Age in years.")

    def __init__(self, name: str, age: int, **data):
        # Positional construction, as in Student("Alice", 20)
        super().__init__(name=name, age=age, **data)
