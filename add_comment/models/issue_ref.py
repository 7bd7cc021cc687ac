"""Target issue or pull request."""

from pydantic import BaseModel, ConfigDict, Field


class IssueRef(BaseModel):
    """Repository coordinates plus issue/PR number; immutable."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    number: int = Field(gt=0)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
