from fastapi import APIRouter, HTTPException, status

from kasiski.api.v1.errors import to_http_exception
from kasiski.core.exceptions import CryptanalysisError
from kasiski.dependencies import SettingsDep
from kasiski.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the Vigenère cipher. Educational tool for generating test ciphertexts.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """Encrypt plaintext, preserving case, spacing and punctuation."""
    # Validate plaintext length
    if len(request.plaintext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    try:
        ciphertext = VigenereEngine().encrypt(request.plaintext, request.key)
    except CryptanalysisError as e:
        raise to_http_exception(e)

    return EncryptResponse(ciphertext=ciphertext, key_used=request.key)
