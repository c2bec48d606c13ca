"""
Address book menu: console + ContactService + flat-file storage.
Run: python -m cli (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from addrbook.application import ContactService
from addrbook.infrastructure import FlatFileCodec, InMemoryContactStore
from cli.menu import MenuDriver

DEFAULT_DATA_FILE = "contacts.csv"
DEFAULT_PHONE_REGION = "US"
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = os.environ.get("ADDRBOOK_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def build_service() -> ContactService:
    data_file = os.environ.get("ADDRBOOK_FILE", "").strip() or DEFAULT_DATA_FILE
    return ContactService(
        InMemoryContactStore(),
        codec=FlatFileCodec(),
        data_file=Path(data_file),
    )


def main() -> None:
    _configure_logging()
    region = os.environ.get("ADDRBOOK_PHONE_REGION", DEFAULT_PHONE_REGION).strip().upper()
    service = build_service()
    logger.info("Using data file %s", service.data_file)
    MenuDriver(service, phone_region=region or None).run()


if __name__ == "__main__":
    main()
