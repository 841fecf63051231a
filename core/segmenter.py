# core/segmenter.py
import math
from core.entities import PageSlice


def segment_pages(full_text: str, page_count: int) -> PageSlice:
    """
    Split `full_text` into `page_count` slices of equal character share.

    Known limitation: these are not real page boundaries. Slice i spans
    [floor(i * avg), floor((i + 1) * avg)) with avg = len / page_count, so
    reported page numbers are approximate and the last slice may stop a
    character short after rounding. Downstream page numbering relies on
    this exact split.
    """
    if page_count <= 0:
        raise ValueError(f"page_count must be positive, got {page_count}")

    avg = len(full_text) / page_count
    return [
        full_text[math.floor(i * avg) : math.floor((i + 1) * avg)]
        for i in range(page_count)
    ]
