from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class Language(str, Enum):
    """Languages with a reference letter-frequency table."""

    ENGLISH = "english"
    PORTUGUESE = "portuguese"


# ============================================================================
# Analysis Schemas
# ============================================================================


class PrimeFactorTally(BaseModel):
    """Votes collected by one prime across all repeat gaps."""

    prime: int
    vote_count: int = Field(ge=0)
    total_count: int = Field(ge=0)


class CosetAnalysis(BaseModel):
    """Shift chosen for one coset of the ciphertext."""

    index: int
    length: int
    shift: int = Field(ge=0, lt=26)
    letter: str
    correlation: float
    distance: float
    chi_squared: float | None = None


class KasiskiReport(BaseModel):
    """Complete result of one Kasiski examination."""

    key: str
    key_length: int = Field(ge=1)
    language: Language
    text_length: int
    repeated_windows: int
    num_repeats: int
    degenerate: bool = False
    factors: list[PrimeFactorTally] = []
    cosets: list[CosetAnalysis] = []


# ============================================================================
# Request Schemas
# ============================================================================


class AnalyzeRequest(BaseModel):
    """Request schema for /analyze endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    language: Language | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1, max_length=100_000)
    key: str | None = None
    language: Language | None = None


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1, max_length=100_000)
    key: str = Field(min_length=1)


# ============================================================================
# Response Schemas
# ============================================================================


class AnalyzeResponse(BaseModel):
    """Response schema for /analyze endpoint."""

    report: KasiskiReport
    plaintext_preview: str
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    key_used: str
    recovered: bool
    explanation: str


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    key_used: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
