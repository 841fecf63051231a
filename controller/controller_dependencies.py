# controller/controller_dependencies.py
from typing import List, Optional
from fastapi import File, UploadFile
from config.settings import settings
from core.openai_client import OpenAIPageJudge
from service.analysis_service import AnalysisService
from util.constants import FormFields
from util.enums import ErrorMessage
from util.errors import AppError


def get_analysis_service() -> AnalysisService:
    judge = (
        OpenAIPageJudge(api_key=settings.OPENAI_API_KEY or "")
        if settings.refinement_enabled
        else None
    )
    return AnalysisService(judge)


async def enforce_upload_limits(
    files: Optional[List[UploadFile]] = File(default=None, alias=FormFields.FILES),
) -> List[UploadFile]:
    uploads = [f for f in (files or []) if f.filename]
    if not uploads:
        raise AppError.of(ErrorMessage.NO_FILES)

    # Hard cap per file while reading initial bytes
    MAX_BYTES = settings.MAX_FILE_MB * 1024 * 1024
    for file in uploads:
        blob = await file.read(MAX_BYTES + 1)
        if len(blob) > MAX_BYTES:
            raise AppError.of(ErrorMessage.FILE_TOO_LARGE)
        # Reset so the service can re-read the stream
        await file.seek(0)
    return uploads
