from typing import List

from pydantic import BaseModel, Field

from .student import Student


class Course(BaseModel):
    """A course, looked up by title, with its enrolled students."""

    title: str = Field(..., min_length=1)
    students: List[Student] = []

    def __init__(self, title: str, **data):
        super().__init__(title=title, **data)

    def add_student(self, student: Student) -> None:
        self.students.append(student)
