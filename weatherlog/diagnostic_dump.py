import json
from collections import Counter

from weatherlog.config import Config
from weatherlog.storage.journal import read_all_records

def main():
    config = Config.from_env()
    records = read_all_records(config.store_path)
    if not records:
        print(f"No records found in {config.store_path}")
        return

    conditions = Counter(r.get('condition') or 'unspecified' for r in records)

    print(f"Found {len(records)} records in {config.store_path}:")
    for condition, n in sorted(conditions.items()):
        print(f"  {condition}: {n}")

    for r in records:
        print(json.dumps(r, indent=2))

if __name__ == "__main__":
    main()
