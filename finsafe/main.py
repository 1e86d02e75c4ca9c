import logging
import traceback
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from finsafe import config
from finsafe.api import chat, health, scam

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("FinSafe AI server starting (environment=%s)", config.ENVIRONMENT)
    logger.info("OpenAI key configured: %s", bool(config.OPENAI_API_KEY))
    if not config.openai_configured():
        logger.info("Using enhanced mock responses")
    yield


app = FastAPI(title="FinSafe AI API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Request validation failed on %s: %s", request.url.path, exc.errors())
    if request.url.path == "/api/chat":
        content = {"reply": chat.EMPTY_MESSAGE_REPLY, "mode": "error"}
    else:
        content = {"error": "Invalid JSON"}
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc)
    logger.error(traceback.format_exc())
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(health.router)
app.include_router(chat.router)
app.include_router(scam.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("finsafe.main:app", host="0.0.0.0", port=config.PORT, reload=config.ENVIRONMENT != "production")
