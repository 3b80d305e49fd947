# scripts/seed_data.py
import sys
import requests
import argparse
from pathlib import Path

# Add parent directory to path so we can import portfolio_api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from portfolio_api.core.config import settings
from portfolio_api.core.logging import configure_logging, logger
from portfolio_api.services.storage import create_storage

# 1x1 transparent PNG
SAMPLE_IMAGE = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def seed_storage(with_sample_photo: bool) -> None:
    """Persist the default profile and, optionally, one sample photo"""
    storage = create_storage(settings)

    profile = storage.update_profile({})
    logger.info(f"Profile saved for {profile.name}")

    if with_sample_photo and not storage.get_all_photos():
        photo = storage.add_photo({
            "title": "Sample photo",
            "image_url": SAMPLE_IMAGE,
            "category": "nature",
            "tags": ["sample"],
        })
        logger.info(f"Created sample photo {photo.id}")


def main():
    """Main entry point for the script"""
    parser = argparse.ArgumentParser(description='Seed storage for the Photo Portfolio API')
    parser.add_argument('--sample-photo', action='store_true', help='Add a sample photo if there are none')
    parser.add_argument('--service-url', type=str, help='URL of the API service for testing')

    args = parser.parse_args()
    configure_logging(settings)

    logger.info(f"Seeding {settings.STORAGE_BACKEND} storage...")
    seed_storage(args.sample_photo)
    logger.info("Storage seeded successfully.")

    # Test API if service URL provided
    if args.service_url:
        base_url = args.service_url.rstrip('/')

        # Try accessing the health check endpoint
        try:
            response = requests.get(f"{base_url}/health")
            if response.status_code == 200:
                logger.info(f"API health check successful: {response.json()}")
            else:
                logger.error(f"API health check failed: {response.status_code}, {response.text}")
        except requests.RequestException as e:
            logger.error(f"Error accessing API: {str(e)}")


if __name__ == "__main__":
    main()
