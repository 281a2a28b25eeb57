"""Container box models."""

from pydantic import BaseModel, ConfigDict, Field


class BoxRecord(BaseModel):
    """One decoded top-level box header.

    Created by the walker the moment a header is decoded, whether or not the
    box body is actually present in the file.
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=4, max_length=4)
    size: int = Field(ge=0)
    offset: int = Field(ge=0)
    is_complete: bool

    @property
    def end(self) -> int:
        """Return the declared end offset of the box."""
        return self.offset + self.size
