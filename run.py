import logging

import uvicorn

from app.config import HOST, LOG_LEVEL, PORT, RELOAD

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

if __name__ == "__main__":
    logging.getLogger("app").info("Video catalog service running on port %d", PORT)
    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_level=LOG_LEVEL,
        access_log=True,
    )
