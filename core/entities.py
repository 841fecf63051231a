# core/entities.py
from dataclasses import dataclass
from typing import List, Optional, Protocol
from model.analysis import RaviStatus


# Approximate per-page text; index i holds page i + 1.
PageSlice = List[str]


@dataclass
class PdfDocumentText:
    text: str
    page_count: int


@dataclass
class PageJudgment:
    """
    Normalized output of one refinement call for a single page.
    """

    found: bool
    status: RaviStatus
    context: str


class PageJudge(Protocol):
    """
    Anything that can judge one page for a Ravi reference.
    Returns None when the backend produced no usable answer.
    """

    async def judge_page(
        self, *, book_name: str, page_number: int, page_text: str
    ) -> Optional[PageJudgment]: ...
