# routes.py
from fastapi import FastAPI
from controller.analysis_controller import analysis_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(analysis_router)
