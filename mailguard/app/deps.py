# mailguard/app/deps.py
from typing import Optional

from fastapi import HTTPException

from ..config import settings
from ..verifier import EmailValidator, get_default_validator


# ---------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------
def get_validator() -> EmailValidator:
    return get_default_validator()


def check_input_length(value: Optional[str], field: str = "email") -> None:
    if value is not None and len(value) > settings.MAX_INPUT_LENGTH:
        raise HTTPException(
            status_code=413,
            detail=f"{field} longer than {settings.MAX_INPUT_LENGTH} characters",
        )
