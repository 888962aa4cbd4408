# create_db.py
import asyncio

from shared.config import get_config
from shared.db import Base, close_db, init_db

# Import models so they are registered with SQLAlchemy's metadata
import services.school_registry.models


async def init_models():
    engine = init_db(get_config().database)
    async with engine.begin() as conn:
        print("🔧 Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
        print("✅ Tables created.")
    await close_db()


if __name__ == "__main__":
    asyncio.run(init_models())
