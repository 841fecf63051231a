"""Shared fixtures: real PDFs built with PyMuPDF and a FastAPI test client."""

from typing import Callable, List

import fitz
import pytest
from fastapi.testclient import TestClient

from controller.controller_dependencies import get_analysis_service
from main import app
from service.analysis_service import AnalysisService


def build_pdf(pages: List[str]) -> bytes:
    """Create a PDF with one page per entry; each line is drawn as text."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        y = 72
        for line in text.split("\n"):
            if line:
                page.insert_text((72, y), line, fontsize=10)
            y += 14
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf() -> Callable[[List[str]], bytes]:
    return build_pdf


@pytest.fixture
def client() -> TestClient:
    """Test client with refinement disabled regardless of the environment."""
    app.dependency_overrides[get_analysis_service] = lambda: AnalysisService(None)
    yield TestClient(app)
    app.dependency_overrides.clear()
