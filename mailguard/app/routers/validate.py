# mailguard/app/routers/validate.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ...verifier import EmailValidationResult, EmailValidator
from ..deps import check_input_length, get_validator

logger = logging.getLogger("mailguard.api")

router = APIRouter()


class ValidateRequest(BaseModel):
    email: Optional[str] = None


def _validation_response(email: Optional[str], validator: EmailValidator) -> dict:
    check_input_length(email)
    result = validator.validate(email)
    logger.debug("validate email=%r result=%s", email, result.value)
    return {
        "email": email,
        "result": result.value,
        "valid": result is EmailValidationResult.valid,
        "message": result.message,
    }


@router.get("/validate")
async def validate_query(
    email: Optional[str] = Query(None),
    validator: EmailValidator = Depends(get_validator),
):
    return _validation_response(email, validator)


@router.post("/validate")
async def validate_body(
    body: ValidateRequest,
    validator: EmailValidator = Depends(get_validator),
):
    return _validation_response(body.email, validator)


@router.get("/tld/{domain}")
async def tld_lookup(
    domain: str,
    validator: EmailValidator = Depends(get_validator),
):
    check_input_length(domain, field="domain")
    return {"domain": domain, "known": validator.is_known_tld(domain)}
