# scripts/seed_data.py
import sys
import requests
import argparse
from pathlib import Path

# Add parent directory to path so we can import nextup modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import nextup.db.base  # noqa: F401
from nextup.db.session import Base, SessionLocal, engine
from nextup.db.init_db import init_db
from nextup.core.logging import logger


def seed_database():
    """Create tables and the demo account"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()


def main():
    """Main entry point for the script"""
    parser = argparse.ArgumentParser(description='Seed database for the NextUp Presentation API')
    parser.add_argument('--service-url', type=str, help='URL of the API service for testing')

    args = parser.parse_args()

    logger.info("Seeding database...")
    seed_database()
    logger.info("Database seeded successfully.")

    # Test API if service URL provided
    if args.service_url:
        base_url = args.service_url.rstrip('/')

        try:
            response = requests.get(f"{base_url}/api/health", timeout=10)
        except requests.RequestException as e:
            logger.error(f"Error accessing API: {str(e)}")
            sys.exit(1)

        if response.status_code == 200:
            logger.info(f"API health check successful: {response.json()}")
        else:
            logger.error(f"API health check failed: {response.status_code}, {response.text}")
            sys.exit(1)


if __name__ == "__main__":
    main()
