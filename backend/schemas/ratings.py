from typing import Dict, List, Literal

from pydantic import BaseModel, Field, model_validator


class VoterRatings(BaseModel):
    voter_id: str
    ratings: Dict[str, int] = Field(default_factory=dict)


class RatingsRequest(BaseModel):
    scale_size: Literal[5, 7, 10] = 5
    voters: List[VoterRatings] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_voters(self) -> "RatingsRequest":
        seen = set()
        for voter in self.voters:
            if voter.voter_id in seen:
                raise ValueError(f"Duplicate voter_id: {voter.voter_id}")
            seen.add(voter.voter_id)
            for genre, rating in voter.ratings.items():
                if not 0 <= rating <= self.scale_size:
                    raise ValueError(
                        f"Rating for {genre!r} by {voter.voter_id!r} must be between 0 and {self.scale_size}"
                    )
        return self

    def ratings_by_index(self) -> Dict[int, Dict[str, int]]:
        return {i: dict(v.ratings) for i, v in enumerate(self.voters)}
