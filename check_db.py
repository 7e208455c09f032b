"""Print what the key-value storage currently holds"""
import json

from jobboard.core.config import settings
from jobboard.core.storage import create_storage

storage = create_storage("database", settings.DATABASE_URL)

print('=== STORAGE KEYS ===')
for key in sorted(storage.keys()):
    raw = storage.get_item(key)
    data = json.loads(raw) if raw else None
    if isinstance(data, list):
        print(f"  {key}: {len(data)} records")
    else:
        print(f"  {key}: {data}")

print()
print('=== JOBS ===')
raw = storage.get_item(f"{settings.STORAGE_KEY_PREFIX}jobs")
for job in json.loads(raw) if raw else []:
    print(f"  {job['id']}: {job['title']} [{job['status']}]")
