#!/usr/bin/env python3
"""Run the HTTP API with uvicorn."""
from dotenv import load_dotenv
load_dotenv()

import uvicorn

from number_words.api.app import create_app
from number_words.config import Settings


if __name__ == "__main__":
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)
