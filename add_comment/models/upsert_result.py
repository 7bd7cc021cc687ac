"""Outcome of a create-or-update run."""

from pydantic import BaseModel, model_validator

from add_comment.models.comment import Comment


class UpsertResult(BaseModel):
    """Written comment and whether it was created or updated."""

    comment: Comment
    created: bool = False
    updated: bool = False

    @model_validator(mode="after")
    def _exactly_one_action(self) -> "UpsertResult":
        if self.created == self.updated:
            raise ValueError("exactly one of created/updated must be true")
        return self
