import logging
from functools import lru_cache

import redis
from pymongo import MongoClient
from pymongo.database import Database

from studynotion.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_mongo_client() -> MongoClient:
    # pymongo clients are thread-safe; one per process
    return MongoClient(settings.MONGO_URI, serverSelectionTimeoutMS=5000)


def get_mongo_db() -> Database:
    return get_mongo_client()[settings.MONGO_DATABASE]


@lru_cache(maxsize=1)
def get_redis_client() -> redis.Redis:
    return redis.from_url(settings.REDIS_URI)


# ==================================
# 🟢 MongoDB connection check
# ==================================
def ping_mongo():
    """Pings MongoDB using the URI and database from the environment."""
    try:
        get_mongo_client().admin.command("ping")
        logger.info(f"🟢 Mongo connected to database: {settings.MONGO_DATABASE}")
        return True
    except Exception as e:
        logger.warning(f"❌ Could not connect to MongoDB: {e}")
        return False


# ==================================
# ⚡ Redis connection check
# ==================================
def ping_redis():
    """Pings the Redis instance holding the login sessions."""
    try:
        get_redis_client().ping()
        logger.info("⚡ Redis connected.")
        return True
    except Exception as e:
        logger.warning(f"❌ Could not connect to Redis: {e}")
        return False


def init_connections():
    """Runs every connection check; failures are logged, never raised."""
    logger.info("--- Checking database connections ---")
    mongo_ok = ping_mongo()
    redis_ok = ping_redis()
    return mongo_ok and redis_ok


if __name__ == "__main__":
    settings.setup_logging()
    init_connections()
