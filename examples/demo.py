from pathlib import Path

import redis
from pymongo import MongoClient

from storescope import Catalog, ScanLimits, Store

HERE = Path(__file__).parent

catalog = Catalog(limits=ScanLimits(max_items=2000, timeout=30))
catalog.add_redis(
    redis.Redis(host="localhost", port=6379, db=0),
    Store(id="cache", name="Session cache"),
    workers=8,
)
catalog.add_mongodb(
    MongoClient("mongodb://localhost:27017")["shop"],
    exclude=["tmp_*"],
)
catalog.write(HERE / "output")

print(f"✅ {catalog}")
