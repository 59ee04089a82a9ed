"""Print row counts and the latest entry for the progress tables."""

import asyncio
import os
import sys

# Allow running from the repository root or from a parent directory
sys.path.append(os.getcwd())

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.db.session import async_session_maker, engine
from app.models import ProgressLog, UserGoal


async def check_data():
    async with async_session_maker() as session:
        for model in (ProgressLog, UserGoal):
            table = model.__tablename__
            try:
                count = (await session.execute(select(func.count()).select_from(model))).scalar()
                print(f"Table '{table}' row count: {count}")
                if count:
                    latest = await session.execute(
                        select(model.user_id, model.created_at).order_by(model.created_at.desc()).limit(1)
                    )
                    user_id, created_at = latest.one()
                    print(f"  Latest: user={user_id} at {created_at.isoformat()}")
            except SQLAlchemyError as e:
                print(f"Error querying {table}: {e}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(check_data())
