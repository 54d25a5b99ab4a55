import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from famfin.api import (
    activity,
    auth,
    bills,
    budgets,
    dashboard,
    expenses,
    family,
    income,
    leaderboard,
    notifications,
    search,
    share,
)
from famfin.core.config import CORS_ORIGINS
from famfin.database import create_db_and_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield


app = FastAPI(title="famfin", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # a failed read must never look like an account with no records
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Could not load financial data."})


app.include_router(auth.router)
app.include_router(expenses.router)
app.include_router(income.router)
app.include_router(bills.router)
app.include_router(family.router)
app.include_router(budgets.router)
app.include_router(dashboard.router)
app.include_router(leaderboard.router)
app.include_router(activity.router)
app.include_router(share.router)
app.include_router(search.router)
app.include_router(notifications.router)


@app.get("/")
def root():
    return {"message": "Family expense tracker"}
