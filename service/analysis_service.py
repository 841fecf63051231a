# service/analysis_service.py
import logging
from typing import List, Optional, Sequence
from fastapi import UploadFile
from config.settings import settings
from core.entities import PageJudge
from core.pdf_text import extract_document_text
from core.ravi_classifier import classify_pages
from core.refinement import refine_results
from core.segmenter import segment_pages
from model.analysis import AnalysisResult
from model.api import AnalyzeResponse

logger = logging.getLogger(__name__)

UNNAMED_BOOK = "document.pdf"


class AnalysisService:
    def __init__(
        self,
        judge: Optional[PageJudge] = None,
        *,
        refine_max_pages: int = settings.REFINE_MAX_PAGES,
        refine_max_chars: int = settings.REFINE_MAX_CHARS,
    ) -> None:
        self._judge = judge
        self._refine_max_pages = refine_max_pages
        self._refine_max_chars = refine_max_chars

    async def analyze_files(self, files: Sequence[UploadFile]) -> AnalyzeResponse:
        """
        Analyze uploads one at a time, in submission order.
        A file that fails contributes nothing; the rest still run.
        """
        all_results: List[AnalysisResult] = []
        for file in files:
            book_name = file.filename or UNNAMED_BOOK
            try:
                data = await file.read()
                all_results.extend(await self.analyze_document(data, book_name))
            except Exception:
                logger.error("analyze.file.error book=%s", book_name, exc_info=True)

        logger.info("analyze.ok files=%d found=%d", len(files), len(all_results))
        return AnalyzeResponse.of(all_results)

    async def analyze_document(
        self, file_bytes: bytes, book_name: str
    ) -> List[AnalysisResult]:
        """
        Keyword pass first; when a judge is configured and something matched,
        a non-empty refinement pass replaces the keyword results.
        """
        doc = extract_document_text(file_bytes)
        pages = segment_pages(doc.text, doc.page_count)
        results = classify_pages(pages, book_name)
        logger.info(
            "analyze.keywords book=%s pages=%d found=%d",
            book_name,
            doc.page_count,
            len(results),
        )

        if self._judge is None or not results:
            return results

        try:
            refined = await refine_results(
                pages,
                book_name,
                self._judge,
                max_pages=self._refine_max_pages,
                max_chars=self._refine_max_chars,
            )
        except Exception:
            logger.error("analyze.refine.error book=%s", book_name, exc_info=True)
            return results

        if refined:
            logger.info(
                "analyze.refine.replace book=%s keyword=%d refined=%d",
                book_name,
                len(results),
                len(refined),
            )
            return refined
        logger.info("analyze.refine.empty book=%s keep=%d", book_name, len(results))
        return results
