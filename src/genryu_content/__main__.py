# -*- coding: utf-8 -*-
"""
Entry point to run the content API via python -m genryu_content.
"""
import argparse

import uvicorn

from genryu_content.config import settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve Genryu Japan content from Strapi as JSON")
    parser.add_argument("--host", default=settings.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Bind port")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args(argv)


def main(argv=None):
    """Start the Uvicorn server."""
    args = parse_args(argv)

    uvicorn.run(
        "genryu_content.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
