from fastapi import APIRouter, HTTPException, status

from kasiski.api.v1.errors import to_http_exception
from kasiski.core.exceptions import CryptanalysisError
from kasiski.dependencies import SettingsDep
from kasiski.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from kasiski.services.engines.polyalphabetic.vigenere import VigenereEngine

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        422: {"model": ErrorResponse, "description": "Key could not be recovered"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt Vigenère ciphertext with a given key, or recover the key first.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext.

    If no key is provided, the key is recovered with a Kasiski examination.
    """
    # Validate ciphertext length
    if len(request.ciphertext) > settings.max_ciphertext_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_ciphertext_length}",
        )

    engine = VigenereEngine()

    try:
        if request.key is not None:
            result = engine.decrypt_with_key(request.ciphertext, request.key)
        else:
            result = engine.find_key_and_decrypt(request.ciphertext, request.language)
    except CryptanalysisError as e:
        raise to_http_exception(e)

    return DecryptResponse(
        plaintext=result.plaintext,
        key_used=result.key,
        recovered=result.recovered,
        explanation=result.explanation,
    )
