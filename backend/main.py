"""
Subject Admin API — main entry point.
Creates FastAPI app, sets up lifespan (subjects store), CORS, request logging middleware,
registers all routes.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware

from subjectadmin.config import logger, CORS_ORIGINS, PORT
from subjectadmin.database import InMemorySubjectsRepository
from subjectadmin.routes import register_all_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - creates the in-memory subjects store"""
    logger.info("🚀 FastAPI app starting up...")
    app.state.subjects_repository = InMemorySubjectsRepository()
    logger.info("REGISTERED ROUTES: %s", [r.path for r in app.routes])

    yield

    logger.info("🛑 FastAPI app shutting down (%d records discarded)", len(app.state.subjects_repository))


# Create the main app with lifespan
app = FastAPI(title="Subject Admin API", lifespan=lifespan)

# Create a router with the /api prefix
api_router = APIRouter(prefix="/api")

# Register all route modules on the api_router
register_all_routes(api_router)

# Include the api_router on the app
app.include_router(api_router)


@app.get("/health")
async def root_health_check():
    """Health check for liveness/readiness probes"""
    return {"status": "healthy", "service": "Subject Admin API"}


# ============== REQUEST LOGGING MIDDLEWARE ==============

@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log method, path, status and duration of every request"""
    start_time = time.time()
    status_code = 500

    try:
        response = await call_next(request)
        status_code = response.status_code
    except Exception as e:
        logger.error(f"Request failed: {str(e)}")
        raise
    finally:
        response_time_ms = int((time.time() - start_time) * 1000)
        logger.info(f"{request.method} {request.url.path} -> {status_code} ({response_time_ms} ms)")

    return response


# ============== CORS ==============

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Server running on http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
