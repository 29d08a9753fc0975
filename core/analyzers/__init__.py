from core.analyzers.authority import analyze_authority
from core.analyzers.domains import extract_domains
from core.analyzers.network import analyze_network
from core.analyzers.outcome import AnalyzerOutcome, Degraded, DegradedReason, Success
from core.analyzers.query_framing import analyze_query_framing, parse_classification

__all__ = [
    "AnalyzerOutcome",
    "Degraded",
    "DegradedReason",
    "Success",
    "analyze_authority",
    "analyze_network",
    "analyze_query_framing",
    "extract_domains",
    "parse_classification",
]
