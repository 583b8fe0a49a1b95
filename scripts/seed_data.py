"""
Seed Database with Sample Data.
Upserts the sample welfare schemes; safe to run repeatedly.
"""

import asyncio
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sahayak.db.database import init_db, close_db
from sahayak.db.repositories.schemes import SchemeRepository
from sahayak.db.seed import seed_schemes


async def main():
    """Seed all data."""
    print("🌱 Starting database seeding...\n")

    # Initialize database first
    await init_db()

    count = await seed_schemes()
    schemes = await SchemeRepository().get_all_active()

    print("\n✅ Database seeding complete!")
    print("\n📊 Summary:")
    print(f"   - {count} schemes upserted")
    print(f"   - {len(schemes)} active schemes in store")
    for scheme in schemes:
        print(f"     • [{scheme.category}] {scheme.name}")

    await close_db()


if __name__ == "__main__":
    asyncio.run(main())
