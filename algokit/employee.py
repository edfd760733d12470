"""A simple employee record."""

from dataclasses import dataclass


@dataclass
class Employee:
    """An employee with a name, a company and an age."""

    name: str
    company: str
    age: int

    def info(self) -> str:
        """Return the employee's details, one field per line."""
        return f"name--{self.name}\ncompany--{self.company}\nage--{self.age}"