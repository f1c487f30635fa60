import argparse
import logging

import uvicorn

from src.api.deps import get_settings

logger = logging.getLogger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DateTime & Calculator API server")
    parser.add_argument("--host", help="Bind address (default: settings / HOST)")
    parser.add_argument("--port", type=int, help="Listening port (default: settings / PORT / 3005)")
    parser.add_argument("--log-level", help="Logging level (default: settings / LOG_LEVEL)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    host = args.host or settings.host
    port = args.port or settings.port
    log_level = (args.log_level or settings.log_level).upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.config_path is not None:
        logger.info("Config loaded from %s", settings.config_path)

    logger.info("Server running on http://localhost:%d", port)
    logger.info("Swagger documentation available at http://localhost:%d%s", port, settings.docs_url)

    uvicorn.run(
        "src.api.main:app",
        host=host,
        port=port,
        log_level=log_level.lower(),
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
