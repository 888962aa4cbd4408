# reset_db.py
import asyncio

from shared.config import get_config
from shared.db import Base, close_db, init_db

import services.school_registry.models


async def reset_db():
    engine = init_db(get_config().database)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await close_db()


if __name__ == "__main__":
    asyncio.run(reset_db())
