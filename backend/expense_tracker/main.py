import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from expense_tracker import config, models
from expense_tracker.database import engine
from expense_tracker.routes import router
from expense_tracker.utils import describe_errors

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("expense_tracker")

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title="Expense Tracker API")

models.Base.metadata.create_all(bind=engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": describe_errors(exc.errors())})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"detail": "Something went wrong"})


@app.get("/api")
def welcome():
    return {"message": "Welcome to the Expense Tracker API"}


@app.get("/", include_in_schema=False)
def client_page():
    return FileResponse(STATIC_DIR / "index.html")


app.include_router(router)

# Not mounted at "/" so trailing-slash API paths still get redirected
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="client")


def serve():
    logger.info(f"Serving on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
