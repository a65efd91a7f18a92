"""HTTP transport for the extractor (FastAPI).

POST /api/extract takes ``{"text": "..."}`` and answers
``{"data": {"models": [...]}}``.  Unusable payloads are a 400; any unexpected
failure is a 500 carrying the exception message and no partial results.
"""

import logging
from datetime import UTC, datetime
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from extractor.assembler import extract_models
from extractor.config import HOST, LOG_LEVEL, PORT
from extractor.errors import InvalidInputError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred during extraction."


def parse_extract_payload(payload: Any) -> str:
    """Return the paper text from a decoded request body.

    Raises ``InvalidInputError`` when the text is missing, not a string, or blank.
    """
    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError()
    return text


def create_app() -> FastAPI:
    app = FastAPI(
        title="Model Efficiency Extractor",
        description="Extract model-efficiency records from research-paper text",
        version="0.1.0",
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "timestamp": datetime.now(UTC).isoformat()}

    @app.post("/api/extract")
    async def extract(request: Request):
        try:
            try:
                payload = await request.json()
            except ValueError as e:
                raise InvalidInputError() from e
            text = parse_extract_payload(payload)
            records = await run_in_threadpool(extract_models, text)
        except InvalidInputError as e:
            return JSONResponse({"error": e.details}, status_code=400)
        except Exception as e:
            logger.exception("Extraction error")
            return JSONResponse({"error": str(e) or UNEXPECTED_ERROR}, status_code=500)

        logger.info("Extracted %d models from %d characters", len(records), len(text))
        return {"data": {"models": [r.model_dump(mode="json") for r in records]}}

    return app


def run(host: str = HOST, port: int = PORT) -> None:
    """Serve the API with uvicorn (blocking)."""
    logger.info("Serving extractor API on http://%s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_level=LOG_LEVEL.lower())
