#!/usr/bin/env python3
"""
Othello AI Engine - Main Entry Point
"""

import logging

import uvicorn

from othello.config import load_settings


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    log = logging.getLogger("othello")
    log.info("Starting Othello AI Engine...")
    log.info("Server will be available at: http://%s:%d", settings.host, settings.port)
    log.info("API documentation: http://%s:%d/docs", settings.host, settings.port)

    uvicorn.run(
        "othello.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
