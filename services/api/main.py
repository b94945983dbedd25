import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from symptom_checker import __version__, config
from symptom_checker.errors import InvalidInput
from symptom_checker.knowledge.catalog import CONDITIONS, RED_FLAGS
from symptom_checker.logging_structured import (
    generate_request_id,
    log_invalid_input,
    log_red_flag_trigger,
    log_request,
    log_startup,
    log_unhandled_error,
)
from symptom_checker.page import INDEX_HTML
from symptom_checker.triage.response import (
    INVALID_INPUT_MESSAGE,
    CheckResponse,
    build_check_response,
    parse_check_request,
)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_startup(condition_count=len(CONDITIONS), red_flag_count=len(RED_FLAGS), port=config.PORT)
    yield


app = FastAPI(title="Symptom Checker API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log_unhandled_error(request_id=generate_request_id(), path=request.url.path, error=repr(exc))
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


async def _read_check_payload(request: Request) -> object:
    """JSON body, or form fields for plain HTML form posts. Malformed or empty JSON is invalid input."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    try:
        return await request.json()
    except ValueError as exc:
        raise InvalidInput(INVALID_INPUT_MESSAGE) from exc


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return INDEX_HTML


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/check", response_model=CheckResponse)
async def check(request: Request) -> CheckResponse:
    request_id = generate_request_id()
    start = time.perf_counter()

    try:
        check_request = parse_check_request(await _read_check_payload(request))
        result = build_check_response(check_request.symptoms)
    except InvalidInput as exc:
        reason = repr(exc.__cause__) if exc.__cause__ else "missing or blank symptoms"
        log_invalid_input(request_id=request_id, reason=reason)
        raise

    if result.red_flags:
        log_red_flag_trigger(request_id=request_id, messages=result.red_flags)
    latency_ms = (time.perf_counter() - start) * 1000
    log_request(
        request_id=request_id,
        latency_ms=latency_ms,
        input_chars=len(result.input),
        red_flag_hits=len(result.red_flags),
        condition_count=0 if result.fallback_used else len(result.possible_conditions),
        fallback_used=result.fallback_used,
    )
    return result


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL)
