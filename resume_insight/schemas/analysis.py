"""Canonical analysis shape and the tagged pipeline outcome."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from resume_insight.schemas.generative import GenerativeAnalysis


class ContactInfo(BaseModel):
    """Contact details found by regex; empty string when absent."""

    model_config = ConfigDict(frozen=True)

    email: str = Field(default="", description="First email address in the text")
    phone: str = Field(default="", description="First phone number in the text")
    location: str = Field(default="", description="First line mentioning a location/address")

    def filled_count(self) -> int:
        return sum(1 for v in (self.email, self.phone, self.location) if v)


class Analysis(BaseModel):
    """Canonical analysis consumed by storage and display, whichever analyzer produced it."""

    model_config = ConfigDict(frozen=True)

    skills: List[str] = Field(default_factory=list, description="Distinct skills, encounter order")
    experience: List[str] = Field(default_factory=list, description="Experience highlights")
    education: List[str] = Field(default_factory=list, description="Education highlights")
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = Field(default="", description="Short free-text summary")
    score: int = Field(default=0, ge=0, le=100, description="Fitness score, 0-100")
    suggestions: List[str] = Field(default_factory=list, description="Improvement suggestions")
    source: Literal["heuristic", "generative"] = Field(default="heuristic")
    generative: Optional[GenerativeAnalysis] = Field(
        default=None, description="Full generative shape (soft skills, tools, strengths) when that path ran"
    )


class Completed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["completed"] = "completed"
    analysis: Analysis
    text: str


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    reason: str


# What the pipeline hands back to its caller; persistence is the caller's job.
AnalysisOutcome = Annotated[Union[Completed, Failed], Field(discriminator="status")]
