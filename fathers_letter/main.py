# fathers_letter/main.py
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from fathers_letter.api import letter, mailbox
from fathers_letter.chains.letter_chain import create_letter_chain
from fathers_letter.config import Settings, settings as default_settings
from fathers_letter.schemas.commons_schemas import ErrorResponse, HealthResponse
from fathers_letter.services.mailbox_service import create_mailbox_service
from fathers_letter.utils.logger import setup_logger

# 記錄器設定
logger = setup_logger()

# 行程啟動時間 (healthz uptime 基準)
PROCESS_STARTED_AT = time.monotonic()


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or default_settings
    setup_logger(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(" 天父的信 服務啟動")
        logger.info(f" 模式: {'示範' if config.demo_mode else 'OpenAI'} | 信箱: {config.mailbox_path}")
        logger.info(f" 基底提示詞: {config.base_prompt_path}")
        yield
        logger.info(" 天父的信 服務結束")

    app = FastAPI(
        title="Father's Letter",
        description="天父的信 - AI 屬靈信件生成 + 信箱",
        version="1.0.0",
        debug=config.debug,
        lifespan=lifespan,
    )

    # 啟動時決定一次 (live / demo)
    app.state.settings = config
    app.state.letter_chain = create_letter_chain(config)
    app.state.mailbox = create_mailbox_service(config.mailbox_path, config.mailbox_max_items)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=str(exc.detail)).model_dump())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f" 請求格式錯誤: {request.url.path}")
        return JSONResponse(status_code=400, content=ErrorResponse(error="請求格式錯誤").model_dump())

    @app.get("/healthz", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(uptime=time.monotonic() - PROCESS_STARTED_AT)

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        svg_path = Path(config.favicon_path)
        try:
            if svg_path.is_file():
                return Response(content=svg_path.read_bytes(), media_type="image/svg+xml")
        except OSError as e:
            logger.warning(f" favicon 讀取失敗: {e}")
        # 無檔案時回 204
        return Response(status_code=204)

    # API 路由
    app.include_router(letter.router, prefix="/api")
    app.include_router(mailbox.router, prefix="/api")

    # 前端靜態檔 (最後掛載，避免蓋過 API)
    if Path(config.static_dir).is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "fathers_letter.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )
