"""
Sample data loader.

Creates a few users and events through the services, so the same
validation and hashing apply as for API requests.  Users whose email
already exists are skipped.

Usage:
    python scripts/seed_db.py [--events-per-user N]
"""

import argparse
import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import ValidationFailure
from app.core.logging_config import setup_logging
from app.db.repositories.event import EventRepository
from app.db.repositories.user import UserRepository
from app.db.session import engine
from app.schemas.event import EventCreate
from app.schemas.user import UserCreate
from app.services.event_service import EventService
from app.services.user_service import UserService

SAMPLE_USERS = [
    {"name": "Ann Example", "email": "ann@example.com", "password": "secret1", "gender": "female"},
    {"name": "Bob Example", "email": "bob@example.com", "password": "secret2", "gender": "male"},
    {"name": "Sam Example", "email": "sam@example.com", "password": "secret3", "gender": "other"},
]

LOCATIONS = ["Main hall", "Room 101", "Online"]


def seed(session: Session, events_per_user: int) -> tuple[int, int]:
    """Insert the sample data.  Returns ``(users_created, events_created)``."""
    users = UserService(UserRepository(session))
    events = EventService(EventRepository(session), UserRepository(session))

    users_created = events_created = 0
    start = datetime.datetime.now(datetime.timezone.utc).replace(minute=0, second=0, microsecond=0) + datetime.timedelta(days=1)

    for payload in SAMPLE_USERS:
        try:
            user = users.create(UserCreate(**payload))
        except ValidationFailure as exc:
            print(f"  skip {payload['email']}: {exc.errors}")
            continue
        users_created += 1

        for n in range(events_per_user):
            begins = start + datetime.timedelta(days=7 * n, hours=users_created)
            events.create(EventCreate(
                title=f"{user.name} meetup #{n + 1}",
                description="Sample event",
                location=LOCATIONS[n % len(LOCATIONS)],
                start_time=begins,
                end_time=begins + datetime.timedelta(hours=2),
                user_id=user.id,
            ))
            events_created += 1

    return users_created, events_created


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--events-per-user", type=int, default=2)
    args = parser.parse_args()

    setup_logging(settings.LOG_LEVEL)
    with Session(engine) as session:
        users_created, events_created = seed(session, args.events_per_user)
    print(f"Created {users_created} users and {events_created} events")


if __name__ == "__main__":
    main()
