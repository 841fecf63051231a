# controller/analysis_controller.py
import logging
from pathlib import Path
from typing import List
from fastapi import APIRouter, Depends, UploadFile, status
from fastapi.responses import FileResponse
from controller.controller_dependencies import (
    enforce_upload_limits,
    get_analysis_service,
)
from model.api import AnalyzeResponse, ErrorResponse
from service.analysis_service import AnalysisService
from util.constants import InternalURIs
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

analysis_router = APIRouter()


@analysis_router.post(
    InternalURIs.ANALYZE,
    response_model=AnalyzeResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze(
    files: List[UploadFile] = Depends(enforce_upload_limits),
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalyzeResponse:
    try:
        return await service.analyze_files(files)
    except Exception:
        logger.error("analyze.error files=%d", len(files), exc_info=True)
        raise AppError.of(ErrorMessage.ANALYSIS_FAILED)


@analysis_router.get(InternalURIs.INDEX, include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")
