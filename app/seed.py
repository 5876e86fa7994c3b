"""Demo content for the public community feed.

Only used when ``community.seed_demo`` is enabled. The in-memory backend
starts empty on every boot, so the feed would otherwise stay blank until
scripts are promoted.
"""

from __future__ import annotations

import logging
import secrets

from app.core.container import ApplicationContainer
from app.modules.accounts import UserCreateInput
from app.modules.scripts import ScriptDraft

logger = logging.getLogger(__name__)

DEMO_EMAIL = "community@scriptforge.app"
DEMO_USERNAME = "scriptforge_community"

DEMO_SCRIPTS: tuple[tuple[str, ScriptDraft], ...] = (
    (
        "fit_with_mara",
        ScriptDraft(
            title="Morning energy routine",
            niche="Fitness & Health",
            content_type="Instagram Reel",
            tone="Energetic",
            length="30 seconds",
            hook="This 30-second morning routine will transform your energy levels forever",
            body="Step one: water before coffee. Step two: two minutes of sunlight. Step three: ten slow squats. "
            "Do it for a week and watch your 3pm crash disappear.",
            cta="Save this and try it tomorrow morning. Tell me how you feel by Friday!",
        ),
    ),
    (
        "devdesk_daily",
        ScriptDraft(
            title="Keyboard shortcut that saves hours",
            niche="Technology",
            content_type="TikTok",
            tone="Casual",
            length="15 seconds",
            hook="This coding trick will save you 10 hours per week",
            body="Multi-cursor editing. Select a word, hit the shortcut, and every match is editable at once. "
            "Renaming across a file takes one second instead of ten minutes.",
            cta="Follow for one dev shortcut every day.",
        ),
    ),
    (
        "five_minute_kitchen",
        ScriptDraft(
            title="Restaurant flavour at home",
            niche="Food & Cooking",
            content_type="YouTube Short",
            tone="Friendly",
            length="60 seconds",
            hook="The ingredient that makes restaurant food taste so good",
            body="It's acid. A squeeze of lemon or a splash of vinegar right before serving wakes up every "
            "other flavour on the plate. Chefs finish almost every dish this way.",
            cta="Try it tonight and comment with what you cooked!",
        ),
    ),
    (
        "mindset_minute",
        ScriptDraft(
            title="The one-week experiment",
            niche="Personal Development",
            content_type="Instagram Reel",
            tone="Inspirational",
            length="30 seconds",
            hook="I couldn't believe the results after just one week",
            body="I wrote down one thing I finished every night for seven days. By day four I was choosing "
            "tasks I could actually finish. By day seven my to-do list was half the size.",
            cta="Start tonight. Share this with a friend who needs a reset.",
        ),
    ),
)


async def seed_demo_community(container: ApplicationContainer) -> int:
    """Create the demo author and promote its scripts. Returns entries created."""
    if await container.account_service.get_by_email(DEMO_EMAIL) is not None:
        logger.info("Demo community content already present")
        return 0

    author = await container.account_service.register(
        UserCreateInput(
            email=DEMO_EMAIL,
            username=DEMO_USERNAME,
            password=secrets.token_urlsafe(24),
            full_name="ScriptForge Community",
        )
    )
    created = 0
    for anonymous_username, draft in DEMO_SCRIPTS:
        script = await container.script_service.save_script(draft, author.id)
        await container.script_service.promote_to_community(script.id, anonymous_username)
        created += 1
    logger.info("Seeded %d community scripts", created)
    return created
