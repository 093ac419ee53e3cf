import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent

logger = logging.getLogger("ankiconnect_mcp.main")


def parse_args(argv=None):
    parser = ArgumentParser(description="Запуск MCP-сервера AnkiConnect на stdio")
    parser.add_argument(
        "--no-run",
        action="store_true",
        help="Проверить загрузку конфигурации без запуска сервера",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Уровень логирования (по умолчанию ANKI_MCP_LOG_LEVEL или INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    load_dotenv(ROOT / ".env")

    from ankiconnect_mcp import app, config
    from ankiconnect_mcp.log import configure_logging

    config.reload_from_env()
    configure_logging(args.log_level)

    if args.no_run:
        logger.info("Конфигурация загружена: AnkiConnect %s", config.ANKI_URL)
        return 0

    logger.info("Anki MCP server running on stdio")
    app.run(transport="stdio")
    return 0


if __name__ == "__main__":
    sys.exit(main())
