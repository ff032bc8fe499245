"""Recipe domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recipe:
    """Recipe with ordered ingredients and preparation steps."""

    id: str | None
    name: str
    ingredients: list[str]
    steps: list[str]
