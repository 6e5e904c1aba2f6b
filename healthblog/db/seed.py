"""
Seed data for a fresh database.

Creates the bootstrap admin account, the default categories and a few
sample posts. Each part is skipped when its data already exists, so the
seed can be run repeatedly.
"""

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from healthblog.configs import settings
from healthblog.managers.password_manager import hash_password
from healthblog.models import UserDB
from healthblog.monitoring import get_logger
from healthblog.repositories import BlogRepository, CategoryRepository, UserRepository
from healthblog.utils.helpers import normalize_email

logger = get_logger(__name__)

DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Nutrition", "Healthy eating, diets and food science"),
    ("Mental Health", "Stress, mindfulness and emotional wellbeing"),
    ("Exercise", "Workouts, training plans and staying active"),
    ("Sleep", "Rest, recovery and better sleep habits"),
    ("Lifestyle", "Everyday habits for a healthier life"),
    ("Preventive Care", "Screenings, check-ups and staying ahead of illness"),
)

SAMPLE_BLOGS: tuple[dict[str, object], ...] = (
    {
        "title": "10 Foods That Boost Your Immune System",
        "content": (
            "A strong immune system starts with what you eat. Citrus fruits, "
            "leafy greens, yogurt and nuts all supply nutrients your body relies "
            "on to fight off infection."
        ),
        "category": "Nutrition",
        "tags": ["immunity", "nutrition", "superfoods"],
    },
    {
        "title": "Five-Minute Mindfulness for Busy Days",
        "content": (
            "You do not need an hour of meditation to feel calmer. Short, focused "
            "breathing breaks spread across the day lower stress and sharpen focus."
        ),
        "category": "Mental Health",
        "tags": ["mindfulness", "stress", "wellbeing"],
    },
    {
        "title": "Building a Sustainable Running Habit",
        "content": (
            "Start slow, run often and rest well. Consistency beats intensity when "
            "you are building endurance, and it keeps injuries away."
        ),
        "category": "Exercise",
        "tags": ["running", "cardio", "habits"],
    },
    {
        "title": "Why Your Evening Routine Decides Your Sleep",
        "content": (
            "Screens, late caffeine and irregular bedtimes all delay sleep. A calm, "
            "repeatable routine tells your body it is time to wind down."
        ),
        "category": "Sleep",
        "tags": ["sleep", "habits", "wellbeing"],
    },
)


@dataclass
class SeedReport:
    """What a seed run created."""

    admin_created: bool = False
    categories_created: list[str] = field(default_factory=list)
    blogs_created: int = 0

    @property
    def changed(self) -> bool:
        return self.admin_created or bool(self.categories_created) or bool(self.blogs_created)


async def seed_admin(user_repo: UserRepository) -> bool:
    """Create the configured admin account unless its email is taken."""
    if await user_repo.email_exists(settings.SEED_ADMIN_EMAIL):
        return False

    await user_repo.create(
        {
            "name": settings.SEED_ADMIN_NAME,
            "email": normalize_email(settings.SEED_ADMIN_EMAIL),
            "password_hash": await hash_password(settings.SEED_ADMIN_PASSWORD.get_secret_value()),
            "role": "admin",
        },
    )
    logger.info("Seeded admin user")
    return True


async def seed_categories(category_repo: CategoryRepository) -> list[str]:
    """Create the default categories when the table is empty."""
    if await category_repo.count():
        return []

    for name, description in DEFAULT_CATEGORIES:
        await category_repo.create({"name": name, "description": description})
    names = [name for name, _ in DEFAULT_CATEGORIES]
    logger.info("Seeded categories", categories=names)
    return names


async def seed_blogs(blog_repo: BlogRepository, user_repo: UserRepository) -> int:
    """Create sample posts by the first admin when there are no posts yet."""
    if await blog_repo.count():
        return 0

    admins = await user_repo.find_many({"role": "admin"}, limit=1, descending=False)
    if not admins:
        logger.warning("No admin user found; skipping sample blogs")
        return 0
    author: UserDB = admins[0]

    for blog in SAMPLE_BLOGS:
        await blog_repo.create({**blog, "author_id": author.id})
    logger.info("Seeded sample blogs", count=len(SAMPLE_BLOGS))
    return len(SAMPLE_BLOGS)


async def seed_database(session: AsyncSession, *, with_blogs: bool = True) -> SeedReport:
    """
    Seed the admin account, default categories and (optionally) sample posts.

    The caller owns the transaction; nothing is committed here.

    Args:
        session: Database session
        with_blogs: Also create sample posts

    Returns:
        SeedReport: What was created
    """
    user_repo = UserRepository(session)
    report = SeedReport(
        admin_created=await seed_admin(user_repo),
        categories_created=await seed_categories(CategoryRepository(session)),
    )
    if with_blogs:
        report.blogs_created = await seed_blogs(BlogRepository(session), user_repo)
    return report
