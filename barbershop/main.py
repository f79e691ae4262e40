from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from barbershop.core.config import settings
from barbershop.core.exceptions import BookingError
from barbershop.api import bookings, notify, catalog
from barbershop.core.logger import setup_logging, logger
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 Starting {settings.SHOP_NAME} backend on port {settings.PORT}")
    if not (settings.SUPABASE_URL and settings.SUPABASE_KEY):
        logger.warning("⚠️ SUPABASE_URL / SUPABASE_KEY not set, booking storage will fail")
    yield
    # Shutdown
    logger.info("🛑 Shutting down backend")

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    if exc.status_code >= 500:
        logger.error(f"❌ {request.method} {request.url.path} failed: {exc.__class__.__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"⚠️ Invalid request body on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Dados inválidos"})

# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "Erro interno do servidor"}
    )

# Include routers
app.include_router(bookings.router, prefix=settings.API_PREFIX, tags=["Bookings"])
app.include_router(notify.router, prefix=settings.API_PREFIX, tags=["Notify"])
app.include_router(catalog.router, prefix=settings.API_PREFIX, tags=["Catalog"])

@app.get("/health")
async def health_check():
    return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("barbershop.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
