from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResolveRequest(BaseModel):
    query: str = Field(min_length=1, max_length=200)


class ResolveResponse(BaseModel):
    matched: bool
    query: str
    normalized_query: str
    matched_name: Optional[str] = None
    matched_alias: Optional[str] = None
    strategy: Optional[str] = None
    score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    payload: Any = None


class MatchedCommitment(BaseModel):
    commitment: str
    logo_url: Any = None
    matched_name: str
    matched_alias: str
    strategy: str
    score: Optional[float] = None


class UnmatchedCommitment(BaseModel):
    commitment: str


class MatchSummary(BaseModel):
    total: int
    matched: int
    unmatched: int


class CommitmentReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    matched_commitments: List[MatchedCommitment] = Field(
        default_factory=list, alias="matchedCommitments"
    )
    unmatched_commitments: List[UnmatchedCommitment] = Field(
        default_factory=list, alias="unmatchedCommitments"
    )
    summary: MatchSummary


class SignupInfo(BaseModel):
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


class RosterCandidate(BaseModel):
    player_id: Any
    matched_name: str
    strategy: str
    score: Optional[float] = None
    signals: List[str] = Field(default_factory=list)


class FindMatchesResponse(BaseModel):
    success: bool = True
    matches: List[RosterCandidate]
    count: int
    message: str


class RosterSearchRequest(BaseModel):
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    school_irn: Optional[str] = None
    limit: int = Field(default=50, ge=1, le=500)


class RosterSearchResponse(BaseModel):
    success: bool = True
    players: List[dict]
    count: int
    message: str
