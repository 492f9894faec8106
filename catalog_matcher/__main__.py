"""`python -m catalog_matcher` - uvicorn으로 서버 실행"""
import uvicorn

from catalog_matcher.app import app
from catalog_matcher.core.config import settings
from catalog_matcher.core.logging import logger


def main() -> None:
    logger.info(f"Server starting on {settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
