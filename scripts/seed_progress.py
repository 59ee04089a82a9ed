"""Seed a user with a few weeks of daily progress logs and a weight goal.

Usage: python scripts/seed_progress.py [user_id] [days]
"""

import asyncio
import os
import random
import sys
from datetime import datetime, timedelta, timezone

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from app.db.progress_store import SqlAlchemyProgressLogStore
from app.db.session import async_session_maker, engine
from app.services.goal_completion import get_or_create_goals
from app.services.progress import get_admin_user_progress, insert_progress


async def main(user_id: str, days: int):
    rng = random.Random(user_id)
    today = datetime.now(timezone.utc).date()
    async with async_session_maker() as session:
        store = SqlAlchemyProgressLogStore(session)
        await get_or_create_goals(store, user_id, {"target_weight": 72, "weekly_workout_target": 4})

        weight = 82.0
        bench, squat, deadlift = 60.0, 80.0, 100.0
        for offset in range(days, -1, -1):
            day = today - timedelta(days=offset)
            trained = rng.random() < 0.7
            weight -= rng.uniform(0, 0.15)
            if trained:
                bench, squat, deadlift = bench + 0.5, squat + 1, deadlift + 1.25
            await insert_progress(store, user_id, {
                "log_date": day.isoformat(),
                "weight": round(weight, 1),
                "calories_intake": rng.randint(1900, 2500),
                "protein_intake": rng.randint(110, 170),
                "workout_completed": trained,
                "workout_type": rng.choice(["Upper", "Lower", "Full body"]) if trained else None,
                "strength_bench": bench if trained else None,
                "strength_squat": squat if trained else None,
                "strength_deadlift": deadlift if trained else None,
                "sleep_hours": round(rng.uniform(6, 8.5), 1),
                "water_intake": round(rng.uniform(1.5, 3.5), 1),
            })
        await session.commit()

        summary = await get_admin_user_progress(store, user_id)
        print(f"Seeded {days + 1} logs for {user_id}")
        print(summary.model_dump_json(by_alias=True, exclude={"logs"}, indent=2))
    await engine.dispose()


if __name__ == "__main__":
    args = sys.argv[1:]
    asyncio.run(main(args[0] if args else "demo-user", int(args[1]) if len(args) > 1 else 45))
