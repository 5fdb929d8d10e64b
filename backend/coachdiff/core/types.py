"""Reusable annotated field types for the pydantic value objects."""

from typing import Annotated

from pydantic import Field, StringConstraints

# Identifiers must carry at least one non-whitespace character
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

PUUIDField = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=78),
]

Counter = Annotated[int, Field(ge=0)]
