"""First-launch database bootstrap.

The schema and seed categories come from the database file bundled with the
package. On first launch it is copied into the user's data directory; later
launches use the copy as-is. There is no migration or versioning step.
"""

import logging
import shutil
from pathlib import Path

from budgetbuddy.store.schema import get_db_path, get_seed_path

logger = logging.getLogger(__name__)


class BootstrapError(Exception):
    """Raised when the seed database cannot be put in place."""


def ensure_database(db_path: Path | None = None, seed_path: Path | None = None) -> bool:
    """Copy the seed database into place unless a database already exists.

    Args:
        db_path: Target database path. If None, uses default location.
        seed_path: Seed database to copy. If None, uses the bundled asset.

    Returns:
        True if the seed was copied, False if the database already existed.

    Raises:
        BootstrapError: If the seed is missing or the copy fails.
    """
    if db_path is None:
        db_path = get_db_path()
    if seed_path is None:
        seed_path = get_seed_path()

    if db_path.exists():
        logger.debug("Using existing database at %s", db_path)
        return False

    if not seed_path.is_file():
        logger.error("Seed database not found at %s", seed_path)
        raise BootstrapError(f"Seed database not found: {seed_path}")

    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(seed_path, db_path)
    except OSError as e:
        logger.error("Failed to copy seed database to %s: %s", db_path, e)
        _discard_partial_copy(db_path)
        raise BootstrapError(f"Could not copy seed database to {db_path}: {e}") from e

    logger.info("Copied seed database to %s", db_path)
    return True


def reset_database(db_path: Path | None = None, seed_path: Path | None = None) -> None:
    """Replace the database with a fresh copy of the seed.

    Args:
        db_path: Target database path. If None, uses default location.
        seed_path: Seed database to copy. If None, uses the bundled asset.

    Raises:
        BootstrapError: If the old file cannot be removed or the copy fails.
    """
    if db_path is None:
        db_path = get_db_path()

    try:
        db_path.unlink(missing_ok=True)
    except OSError as e:
        logger.error("Failed to remove database %s: %s", db_path, e)
        raise BootstrapError(f"Could not remove {db_path}: {e}") from e

    logger.warning("Removed database %s", db_path)
    ensure_database(db_path, seed_path)


def _discard_partial_copy(db_path: Path) -> None:
    try:
        db_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial copy %s: %s", db_path, e)
