from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admins import router as admins_router
from core import config, db, handlers, logging_conf
from pathways import router as pathways_router

logging_conf.setup_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="eduverse api", lifespan=lifespan)

# Allow the admin console dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

handlers.register_exception_handlers(app)

app.include_router(pathways_router.router, tags=["pathways"])
app.include_router(admins_router.router, tags=["admins"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "eduverse api"}
