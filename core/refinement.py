# core/refinement.py
from typing import List, Sequence
from core.entities import PageJudge
from core.ravi_classifier import pages_with_ravi, truncate_context
from model.analysis import AnalysisResult
from util.timing import timed
import logging

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 10
DEFAULT_MAX_CHARS = 3000


async def refine_results(
    pages: Sequence[str],
    book_name: str,
    judge: PageJudge,
    *,
    max_pages: int = DEFAULT_MAX_PAGES,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> List[AnalysisResult]:
    """
    Ask `judge` about the first `max_pages` slices mentioning "ravi", one at a
    time. A page whose call fails or whose reply says found=false contributes
    nothing; the others yield one result each.
    """
    hits = pages_with_ravi(pages)[:max_pages]
    results: List[AnalysisResult] = []

    with timed(logger, "refine", book=book_name, pages=len(hits)):
        for page_number, text in hits:
            try:
                judgment = await judge.judge_page(
                    book_name=book_name,
                    page_number=page_number,
                    page_text=text[:max_chars],
                )
            except Exception:
                logger.error(
                    "refine.page.error book=%s page=%d",
                    book_name,
                    page_number,
                    exc_info=True,
                )
                continue

            if judgment is None or not judgment.found:
                continue
            results.append(
                AnalysisResult(
                    bookName=book_name,
                    status=judgment.status,
                    page=page_number,
                    context=truncate_context(judgment.context),
                )
            )

    logger.info("refine.result book=%s count=%d", book_name, len(results))
    return results
