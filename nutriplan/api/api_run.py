from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

from nutriplan.domain.errors import InvalidRequest
from nutriplan.api.routes import plans

# Logging
logger = logging.getLogger("nutriplan_app")

# Initialize FastAPI app
app = FastAPI(title="Nutrition Planner API")

# Include routers
app.include_router(plans.router)


@app.exception_handler(InvalidRequest)
async def _invalid_request(request: Request, exc: InvalidRequest):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(Exception)
async def _internal_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
