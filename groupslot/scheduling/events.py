import secrets
import string
from datetime import UTC, datetime

from groupslot.models.scheduling import Event


def generate_id(length: int = 10) -> str:
    chars = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(chars) for _ in range(length))


def create_event(
    title: str,
    start_date: str,
    end_date: str,
    description: str = "",
    event_id: str | None = None,
) -> Event:
    """New event with no participants.

    The date range is taken as given; a reversed range simply produces an
    empty grid downstream.
    """
    return Event(
        id=event_id or generate_id(),
        title=title,
        description=description,
        start_date=start_date,
        end_date=end_date,
        created_at=datetime.now(UTC).isoformat(),
        participants=[],
    )
