import argparse
import logging

import config
from controllers.cli import CommandLineInterface
from database import Database
from services.ai_service import AIPlayer, RandomAI
from services.game_repository import GameRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: str = None):
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Gomoku (five in a row) against a random AI")
    parser.add_argument("--db-url", default=config.DATABASE_URL, help="SQLAlchemy database URL")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random AI")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper(), config.LOG_FILE)
    logger.info("Gomoku application started")

    database = Database(args.db_url)
    try:
        database.init_schema()
        cli = CommandLineInterface(
            GameRepository(database),
            ai_player=AIPlayer(RandomAI(args.seed)),
        )
        cli.start()
    finally:
        database.close()
        logger.info("Gomoku application terminated")


if __name__ == "__main__":
    main()
