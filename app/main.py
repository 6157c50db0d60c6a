import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.categories import router as categories_router
from app.api.videos import router as videos_router
from app.config import CORS_ORIGINS, VIDEOS_DATA_FILE

log = logging.getLogger("app.main")

app = FastAPI(title="Video Catalog Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(videos_router)
app.include_router(categories_router)

log.info("Video catalog backed by %s", VIDEOS_DATA_FILE)


@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "video_catalog",
        "data_file": str(VIDEOS_DATA_FILE),
    }
