"""Run the reminder notification generator once from the command line."""

from __future__ import annotations

import argparse

from fleet_manager.application.use_cases.notifications import generate_notifications
from fleet_manager.config import get_settings
from fleet_manager.domain.exceptions import FleetManagerError
from fleet_manager.infrastructure.database import SessionLocal, initialize_database
from fleet_manager.utils import configure_logging


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for a generation run."""

    parser = argparse.ArgumentParser(
        description="Create notifications for reminders that are due soon or overdue.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Create notifications even when an active one already exists for the same reminder.",
    )
    return parser.parse_args()


def main() -> None:
    """Generate notifications using the configured database."""

    args = parse_args()
    configure_logging(get_settings().log_level)
    initialize_database()

    session = SessionLocal()
    try:
        created = generate_notifications(session, force=args.force)
    except FleetManagerError as exc:
        raise SystemExit(f"Notification generation failed: {exc}") from exc
    else:
        print(f"Generated {len(created)} new notifications")
    finally:
        session.close()


if __name__ == "__main__":
    main()
