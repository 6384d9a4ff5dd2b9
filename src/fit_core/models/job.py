"""Job requirement models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fit_core.models.candidate import ExperienceLevel, WorkPreferences


class ExperienceRequirement(BaseModel):
    """Experience the role asks for."""

    years: float = Field(default=0.0, ge=0, description="Required years of experience")
    level: ExperienceLevel = Field(default="entry", description="Required seniority level")


class CompanyInfo(BaseModel):
    """Employer details relevant to matching."""

    name: str = Field(description="Company name")
    size: str | None = Field(default=None, description="Company size band")
    industry: str | None = Field(default=None, description="Primary industry")
    culture: list[str] = Field(default_factory=list, description="Culture/value tags")


class JobRequirements(BaseModel):
    """Requirements and offer details of a single role."""

    id: str | None = Field(default=None, description="Job identifier")
    title: str = Field(description="Job title")
    description: str = Field(default="", description="Job description text")
    must_have: list[str] = Field(default_factory=list, description="Required skills")
    nice_to_have: list[str] = Field(default_factory=list, description="Preferred skills")
    experience: ExperienceRequirement = Field(default_factory=ExperienceRequirement)
    education: str | None = Field(default=None, description="Education requirement text")
    preferences: WorkPreferences = Field(default_factory=WorkPreferences)
    company: CompanyInfo = Field(description="Hiring company")
