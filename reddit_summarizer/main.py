from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reddit_summarizer.api.routes import summarize
from reddit_summarizer.config import settings
from reddit_summarizer.errors import SummarizerError, UpstreamAuthError
from reddit_summarizer.services import logger as log_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    missing = settings.missing_credentials()
    if missing:
        log_service.logger.warning(
            f"Missing configuration, summarize requests will fail: {', '.join(missing)}"
        )
    yield


app = FastAPI(
    title="Reddit Summarizer",
    description="Answers questions from Reddit discussions found via web search",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SummarizerError)
async def summarizer_error_handler(request: Request, exc: SummarizerError):
    if isinstance(exc, UpstreamAuthError):
        log_service.logger.error(f"{exc.provider} authentication failed. Check credentials. ({exc.detail})")
    elif exc.status_code >= 500:
        log_service.logger.error(f"Request failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = "Invalid JSON in request body."
    else:
        message = "Invalid question provided"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log_service.log_event(
        event_type="unhandled_error",
        message="Unhandled error in summarize request",
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(status_code=500, content={"error": "Failed to process request."})


# Routes
app.include_router(summarize.router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "service": "reddit-summarizer"}
