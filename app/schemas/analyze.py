from __future__ import annotations

from typing import List

from pydantic import Field

from app.schemas.common import CamelModel


class CitedSource(CamelModel):
    url: str


class AnalyzeRequest(CamelModel):
    user_query: str = ""
    cited_sources: List[CitedSource] = Field(default_factory=list)


class QueryFramingMetric(CamelModel):
    score: int = Field(ge=0, le=100)
    details: str
    is_biased: bool = False


class NetworkMetric(CamelModel):
    score: int = Field(ge=0, le=100)
    details: str
    shared_ip_domains: List[str] = Field(default_factory=list)
    unresolved_domains: List[str] = Field(default_factory=list)


class AuthorityMetric(CamelModel):
    score: int = Field(ge=0, le=100)
    details: str
    low_authority_count: int = 0


class TrustMetrics(CamelModel):
    query_framing: QueryFramingMetric
    network_analysis: NetworkMetric
    simplified_eeat: AuthorityMetric = Field(alias="simplifiedEEAT")


class AnalyzeResponse(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    summary: str
    alternative_answer: str
    metrics: TrustMetrics
