"""Bootstrap for an embedding UI: logging, config validation and store wiring"""
import logging
from pathlib import Path
from typing import Optional

from garden.config import DATA_PATH, LOG_LEVEL, TIMEZONE, validate_config
from garden.services import GardenService
from garden.storage import FileKeyValueStore
from garden.utils.datetime_helpers import Clock, SystemClock

logger = logging.getLogger(__name__)


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging (no-op if the host already configured it)"""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, level.upper())
    )


def create_garden(data_path: Optional[Path] = None, clock: Optional[Clock] = None) -> GardenService:
    """
    Open the garden stored under `data_path`

    Args:
        data_path: Directory for the persisted records (GARDEN_DATA_PATH by default)
        clock: Date provider (system clock in GARDEN_TIMEZONE by default)
    """
    setup_logging()
    validate_config()

    path = Path(data_path) if data_path is not None else DATA_PATH
    logger.info(f"Opening garden at {path}")

    return GardenService.open(
        FileKeyValueStore(path),
        clock=clock or SystemClock(TIMEZONE),
    )
