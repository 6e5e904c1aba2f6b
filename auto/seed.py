#!/usr/bin/env python3
"""
Seed Database Script.

Creates the tables if needed, then the bootstrap admin account, the default
categories and a few sample posts. Safe to run more than once: existing
data is left alone.

Usage:
    uv run python auto/seed.py
    uv run python auto/seed.py --no-blogs

Environment Variables:
    DATABASE_URL: Target database
    SEED_ADMIN_EMAIL: Admin email (default: admin@healthblog.com)
    SEED_ADMIN_PASSWORD: Admin password (default: admin123)
    SEED_ADMIN_NAME: Admin display name (default: Admin User)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from pathlib import Path
from sys import exit as sys_exit
from sys import path as sys_path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from healthblog.configs import settings  # noqa: E402
from healthblog.db import close_db, init_db, transaction  # noqa: E402
from healthblog.db.seed import SeedReport, seed_database  # noqa: E402
from healthblog.monitoring import configure_logging  # noqa: E402


def parse_args() -> Namespace:
    """
    Parse command line arguments.

    Returns
    -------
    Namespace
        Parsed arguments.
    """
    parser = ArgumentParser(
        description="Seed the Health & Wellness Blog database",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--no-blogs",
        action="store_true",
        help="Skip the sample blog posts",
    )
    return parser.parse_args()


def display_report(report: SeedReport) -> None:
    """
    Print what the seed run created.

    Parameters
    ----------
    report : SeedReport
        Result of the seed run.
    """
    print("=" * 60)
    print("Seed Summary")
    print("=" * 60)
    if not report.changed:
        print("Nothing to do: the database is already seeded.")
        return

    if report.admin_created:
        print(f"Admin user:  {settings.SEED_ADMIN_EMAIL}")
        print("⚠️  Change the default admin password before going live.")
    if report.categories_created:
        print(f"Categories:  {', '.join(report.categories_created)}")
    if report.blogs_created:
        print(f"Blog posts:  {report.blogs_created}")


async def run_seed(*, with_blogs: bool) -> SeedReport:
    """Create tables and seed them inside a single transaction."""
    await init_db()
    try:
        async with transaction() as session:
            return await seed_database(session, with_blogs=with_blogs)
    finally:
        await close_db()


def main() -> int:
    args = parse_args()
    configure_logging()

    try:
        report = asyncio_run(run_seed(with_blogs=not args.no_blogs))
    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        return 1

    display_report(report)
    return 0


if __name__ == "__main__":
    sys_exit(main())
