"""Result models returned by the candidate ranker."""

from pydantic import BaseModel, Field, computed_field

from distspell.core.types import Accuracy, Match, SpellcheckStatus


class SpellcheckResult(BaseModel):
    """Outcome of checking one word against a dictionary."""

    query: str
    status: SpellcheckStatus
    accuracy: Accuracy
    max_distance: int = Field(ge=0)
    matches: list[Match] = Field(default_factory=list)
    elapsed_time: float = Field(0.0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def suggest_lower_accuracy(self) -> bool:
        """True when nothing matched and a more permissive level exists."""
        return self.status is SpellcheckStatus.UNKNOWN and self.accuracy > Accuracy.LOW
