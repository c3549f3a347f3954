# -*- coding: UTF-8 -*-
import uvicorn

from backend.api_app import create_api
from backend.helpers.logging import logger
from backend.utils import settings

app = create_api()


def main():
    logger.info(f"Server Running on port {settings.API_PORT}")
    uvicorn.run("backend.api_app:app",
                host=settings.API_HOST,
                port=settings.API_PORT)


if __name__ == "__main__":
    main()
