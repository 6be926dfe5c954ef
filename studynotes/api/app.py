from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from studynotes.config.settings import Settings
from studynotes.database.connection import close_pool, init_pool
from studynotes.ingestion.models import IngestionResponse, RawFile, ResponseCode, UploadRequest
from studynotes.ingestion.processor import IngestionPipeline, build_ingestion_pipeline
from studynotes.logging.logger import Log
from studynotes.validation.validator import MIME_PLAIN_TEXT

HTTP_STATUS: dict[ResponseCode, int] = {
    ResponseCode.OK: 200,
    ResponseCode.RATE_LIMITED: 429,
    ResponseCode.BAD_REQUEST: 400,
    ResponseCode.CONTENT_REJECTED: 422,
    ResponseCode.INTERNAL_ERROR: 500,
}

PASTED_TEXT_FILE_NAME = "pasted.txt"


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    try:
        app.state.pipeline = build_ingestion_pipeline(settings)
        Log.info(f"Ingestion API started ({settings.app_env})")
        yield
    finally:
        close_pool()


app = FastAPI(title="studynotes-ingest", lifespan=lifespan)


class TextNoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    title: str
    content: str
    description: str | None = None


def get_pipeline(request: Request) -> IngestionPipeline:
    return request.app.state.pipeline


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/notes/upload")
async def upload_notes(
    user_id: str = Form("", alias="userId"),
    title: str = Form(""),
    description: str | None = Form(None),
    files: list[UploadFile] | None = File(None),
    pipeline: IngestionPipeline = Depends(get_pipeline),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    if not user_id:
        return _error(400, "User ID is required")

    raw_files = [
        await _read_upload(upload, settings.max_file_size_bytes) for upload in files or []
    ]

    request = UploadRequest(
        requester_id=user_id,
        title=title,
        files=tuple(raw_files),
        description=description,
    )
    return _to_http(await run_in_threadpool(pipeline.handle, request))


@app.post("/api/notes/text")
def upload_text_note(
    body: TextNoteRequest,
    pipeline: IngestionPipeline = Depends(get_pipeline),
) -> JSONResponse:
    pasted = RawFile.from_bytes(
        PASTED_TEXT_FILE_NAME, MIME_PLAIN_TEXT, body.content.encode("utf-8")
    )
    request = UploadRequest(
        requester_id=body.user_id,
        title=body.title,
        files=(pasted,),
        description=body.description,
    )
    return _to_http(pipeline.handle(request))


async def _read_upload(upload: UploadFile, max_bytes: int) -> RawFile:
    """Read at most one byte past the cap; the validator rejects anything longer."""
    content = await upload.read(max_bytes + 1)
    size = max(upload.size or 0, len(content))
    return RawFile(
        name=upload.filename or "upload",
        mime_type=upload.content_type or "application/octet-stream",
        size=size,
        content=content,
    )


def _to_http(response: IngestionResponse) -> JSONResponse:
    status = HTTP_STATUS[response.code]
    if response.code is not ResponseCode.OK or response.note is None:
        return _error(status, response.error or "Failed to upload notes", response.categories)

    payload: dict[str, Any] = {
        "note": asdict(response.note.note),
        "message": "Upload successful",
        "summary_generated": response.note.summary_generated,
        "degraded_files": list(response.note.degraded_files),
    }
    return JSONResponse(status_code=status, content=jsonable_encoder(payload))


def _error(status: int, message: str, categories: tuple[str, ...] = ()) -> JSONResponse:
    content: dict[str, Any] = {"error": message}
    if categories:
        content["categories"] = list(categories)
    return JSONResponse(status_code=status, content=content)
