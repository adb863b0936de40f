"""Edit script and statistics models shared by the engine, renderer and history"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Equal(BaseModel):
    """A line present unchanged on both sides."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["equal"] = "equal"
    left: str
    right: str

    @model_validator(mode="after")
    def _same_text(self) -> "Equal":
        if self.left != self.right:
            raise ValueError("Equal entries must carry identical lines")
        return self


class Delete(BaseModel):
    """A left line with no counterpart on the right."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["delete"] = "delete"
    left: str


class Insert(BaseModel):
    """A right line with no counterpart on the left."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["add"] = "add"
    right: str


class Change(BaseModel):
    """A delete immediately followed by an insert, merged into one replacement."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["change"] = "change"
    left: str
    right: str


EditOp = Annotated[Union[Equal, Delete, Insert, Change], Field(discriminator="kind")]


class Stats(BaseModel):
    """Per-kind counts over one edit script; equal entries are not counted."""
    model_config = ConfigDict(frozen=True)
    add:    int = Field(default=0, ge=0)
    delete: int = Field(default=0, ge=0)
    change: int = Field(default=0, ge=0)

    def summary(self) -> str:
        return f"add: {self.add}, delete: {self.delete}, change: {self.change}"
