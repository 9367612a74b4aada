import logging

import uvicorn

from videoteca.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    if settings.is_test:
        # Test harnesses import videoteca.main:app directly
        logger.info("ENVIRONMENT=test, not binding a socket")
        return
    uvicorn.run("videoteca.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
