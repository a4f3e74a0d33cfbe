from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from review_api.api import auth, comments, health, messages, movies, profile, ratings, users
from review_api.api.dependencies import get_request_body
from review_api.core.config import settings
from review_api.core.logging import configure_logging
from review_api.db.documents import DocumentStore
from review_api.db.retry import RetryPolicy
from review_api.db.session import RelationalStore
from review_api.exceptions.handlers import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from review_api.middleware import RequestLoggingMiddleware

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    retry_policy = RetryPolicy(
        max_retries=settings.STORE_CONNECT_RETRIES,
        delay_seconds=settings.STORE_CONNECT_DELAY_SECONDS,
    )
    app.state.relational = RelationalStore(settings.DATABASE_URL, retry_policy=retry_policy)
    app.state.documents = DocumentStore(settings.MONGO_URI, settings.MONGO_DB_NAME, retry_policy=retry_policy)

    await app.state.relational.connect()
    await app.state.documents.connect()
    yield
    await app.state.documents.close()
    await app.state.relational.dispose()


app = FastAPI(
    title=settings.TITLE,
    description="Movie catalog with ratings, comments and messages",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# The health check answers whatever the body is
app.include_router(health.router)

for router in (
    auth.router,
    users.router,
    profile.router,
    movies.router,
    ratings.router,
    comments.router,
    messages.router,
):
    app.include_router(router, dependencies=[Depends(get_request_body)])

if __name__ == "__main__":
    uvicorn.run("review_api.main:app", host="0.0.0.0", port=settings.PORT)
