# mailguard/app/routers/uploads.py
import logging

from fastapi import (
    APIRouter,
    Depends,
    File,
    HTTPException,
    Query,
    Response,
    UploadFile,
)

from ...bulk import parse_upload, render_results, validate_many
from ...config import settings
from ...verifier import EmailValidator
from ..deps import get_validator

logger = logging.getLogger("mailguard.api")

router = APIRouter()


@router.post("/validate", response_model=None)
async def validate_upload(
    file: UploadFile = File(...),
    file_format: str = Query("json", pattern="^(json|csv|txt)$"),
    validator: EmailValidator = Depends(get_validator),
):
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File larger than {settings.MAX_UPLOAD_SIZE_MB} MB")

    try:
        emails = parse_upload(file.filename, content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Upload %s parsed %d addresses", file.filename, len(emails))
    summary = validate_many(emails, validator=validator)

    if file_format == "json":
        return summary.to_dict()

    body = render_results(summary, file_format)
    if file_format == "csv":
        payload = ("\ufeff" + body).encode("utf-8")
        return Response(
            payload,
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="results.csv"'},
        )

    return Response(
        body.encode("utf-8"),
        media_type="text/plain",
        headers={"Content-Disposition": 'attachment; filename="results.txt"'},
    )
