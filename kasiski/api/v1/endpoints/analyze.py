from fastapi import APIRouter, HTTPException, status

from kasiski.api.v1.errors import to_http_exception
from kasiski.core.exceptions import CryptanalysisError
from kasiski.dependencies import SettingsDep
from kasiski.models.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine
from kasiski.services.pipeline.examiner import KasiskiExaminer

router = APIRouter()

PREVIEW_LENGTH = 200


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        422: {"model": ErrorResponse, "description": "Ciphertext cannot be analyzed"},
    },
    summary="Analyze ciphertext",
    description=(
        "Run a Kasiski examination on repeating-key ciphertext: "
        "repeat detection, prime-factor voting, key length and key recovery."
    ),
)
async def analyze_ciphertext(
    request: AnalyzeRequest,
    settings: SettingsDep,
) -> AnalyzeResponse:
    """
    Analyze ciphertext and recover its key.

    The analysis pipeline:
    1. Normalize the ciphertext to letters only
    2. Find repeated trigrams and the gaps between them
    3. Vote on prime factors of the gaps to get the key length
    4. Recover each key letter by frequency correlation
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    try:
        examiner = KasiskiExaminer(
            language=request.language,
            threshold=settings.kasiski_threshold,
            prime_limit=settings.kasiski_prime_limit,
        )
        report = examiner.examine(request.ciphertext)
    except CryptanalysisError as e:
        raise to_http_exception(e)

    engine = VigenereEngine()
    plaintext = engine.decrypt(request.ciphertext, report.key)

    return AnalyzeResponse(
        report=report,
        plaintext_preview=plaintext[:PREVIEW_LENGTH],
        explanation=engine.explain(report.key),
    )
