# core/ravi_classifier.py
import re
from typing import List, Sequence, Tuple
from model.analysis import AnalysisResult, RaviStatus
from util import functions
from util.timing import timed
import logging

logger = logging.getLogger(__name__)

RAVI_WORD = "ravi"
CONTEXT_RADIUS = 100

# Windows never cross a line terminator (\n, \r, U+2028, U+2029).
# ASCII-only case folding: "RAV\u0131" (dotless i) is not a mention.
_LINE_CHAR = r"[^\n\r\u2028\u2029]"
_RAVI_FLAGS = re.IGNORECASE | re.ASCII
_RAVI = re.compile(RAVI_WORD, _RAVI_FLAGS)
_RAVI_WINDOW = re.compile(
    r"%s{0,%d}%s%s{0,%d}"
    % (_LINE_CHAR, CONTEXT_RADIUS, RAVI_WORD, _LINE_CHAR, CONTEXT_RADIUS),
    _RAVI_FLAGS,
)

_THIQAH_TERMS: Tuple[str, ...] = (
    "thiqah",
    "thiqa",
    "trustworthy",
    "reliable",
    "authentic",
    "صدوق",
    "ثقة",
    "موثوق",
    "acceptable",
    "sound",
    "strong",
)

_ZAEEF_TERMS: Tuple[str, ...] = (
    "zaeef",
    "daeef",
    "weak",
    "unreliable",
    "doubtful",
    "ضعيف",
    "متروك",
    "rejected",
    "fabricated",
    "poor",
)

# Evaluated top to bottom; the first contained term decides.
# Every trustworthy term outranks every weak term.
CLASSIFICATION_RULES: Tuple[Tuple[str, RaviStatus], ...] = tuple(
    [(t, RaviStatus.Thiqah) for t in _THIQAH_TERMS]
    + [(t, RaviStatus.Zaeef) for t in _ZAEEF_TERMS]
)


def mentions_ravi(text: str) -> bool:
    return _RAVI.search(text) is not None


def find_contexts(page_text: str) -> List[str]:
    """
    Every non-overlapping window of up to 100 chars either side of "ravi",
    whitespace-trimmed. Windows are shorter near the edges of the text.
    """
    return [m.group(0).strip() for m in _RAVI_WINDOW.finditer(page_text)]


def classify_context(context: str) -> RaviStatus:
    lowered = context.lower()
    for term, status in CLASSIFICATION_RULES:
        if term in lowered:
            return status
    return RaviStatus.Unknown


def truncate_context(context: str) -> str:
    return functions.clip_chars(context)


def classify_pages(pages: Sequence[str], book_name: str) -> List[AnalysisResult]:
    """
    Keyword pass over approximate page slices. One result per "ravi" window,
    tagged with the 1-based page number. Pages without "ravi" yield nothing.
    """
    results: List[AnalysisResult] = []
    with timed(logger, "classify.keywords", pages=len(pages)):
        for page_number, page_text in enumerate(pages, start=1):
            if not mentions_ravi(page_text):
                continue
            for context in find_contexts(page_text):
                results.append(
                    AnalysisResult(
                        bookName=book_name,
                        status=classify_context(context),
                        page=page_number,
                        context=truncate_context(context),
                    )
                )
    logger.info("classify.keywords.result count=%d", len(results))
    return results


def pages_with_ravi(pages: Sequence[str]) -> List[Tuple[int, str]]:
    """[(page_number, page_text)] for every slice mentioning "ravi"."""
    return [
        (page_number, text)
        for page_number, text in enumerate(pages, start=1)
        if mentions_ravi(text)
    ]
