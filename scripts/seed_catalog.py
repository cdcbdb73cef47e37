"""
Seed the catalog database with movies and TV shows.
Run once against an empty database; it does nothing if content already exists.
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import json
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from media_catalog_service.models import Base, ContentKind
from media_catalog_service.models.content import TV_SHOW_STATUSES
from media_catalog_service.repos import ContentRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = project_root / 'data' / 'seed_catalog.json'


def load_seed_data(path: Path) -> Dict[str, List[Dict]]:
    """
    Load seed content from a JSON file.

    The file holds a "movies" list and a "tv_shows" list.

    Args:
        path: Path to the JSON file

    Returns:
        Dict with movies and tv_shows lists
    """
    with open(path) as f:
        data = json.load(f)

    movies = data.get('movies', [])
    tv_shows = data.get('tv_shows', [])

    for show in tv_shows:
        status = show.get('status')
        if status is not None and status not in TV_SHOW_STATUSES:
            raise ValueError(f"Invalid status {status!r} for show {show.get('title')!r}")

    logger.info(f"Loaded {len(movies)} movies and {len(tv_shows)} TV shows from {path}")
    return {'movies': movies, 'tv_shows': tv_shows}


def seed_catalog(db: Session, data: Dict[str, List[Dict]]) -> Dict[str, int]:
    """
    Insert seed content unless the catalog already has movies.

    Args:
        db: Database session
        data: Output of load_seed_data

    Returns:
        Dict with number of movies and tv_shows inserted
    """
    repo = ContentRepository(db)

    if repo.count_content(ContentKind.MOVIE) > 0:
        logger.info("⊘ Database already seeded")
        return {'movies': 0, 'tv_shows': 0}

    return {
        'movies': repo.bulk_store_content(ContentKind.MOVIE, data['movies']),
        'tv_shows': repo.bulk_store_content(ContentKind.TV, data['tv_shows']),
    }


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(description='Seed the media catalog database')
    parser.add_argument(
        '--input',
        type=Path,
        default=DEFAULT_SEED_FILE,
        help='Seed JSON file (default: data/seed_catalog.json)'
    )
    parser.add_argument(
        '--create-tables',
        action='store_true',
        help='Create missing tables before seeding'
    )

    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info("SEEDING MEDIA CATALOG")
    logger.info("=" * 70)

    try:
        from media_catalog_service.models.database import SessionLocal, engine

        if args.create_tables:
            Base.metadata.create_all(engine)
            logger.info("✓ Tables created")

        data = load_seed_data(args.input)

        db = SessionLocal()
        try:
            counts = seed_catalog(db, data)
        finally:
            db.close()

        logger.info(f"✓ Seeded {counts['movies']} movies and {counts['tv_shows']} TV shows")

    except Exception as e:
        logger.error(f"Error seeding catalog: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
