#!/usr/bin/env python3
"""
Demo data seed script for the onboarding tracker.

This script writes the five sample employees and their onboarding task
sets into the configured store (STORE_BACKEND / REDIS_URL). Pass
"reset" to clear the namespace first.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from onboarding_tracker.config.settings import settings
from onboarding_tracker.core.dependencies import get_storage, get_store
from onboarding_tracker.core.logging import setup_logging
from onboarding_tracker.services.domain.progress import calculate_progress
from onboarding_tracker.services.workflows import DemoDataSeeder


def main():
    """Main seeding function."""
    setup_logging()
    storage = get_storage(get_store())
    seeder = DemoDataSeeder(storage)

    print(f"🌱 Seeding {settings.store_backend} store, namespace '{settings.storage_namespace}'")
    print("=" * 50)

    if len(sys.argv) > 1 and sys.argv[1] == "reset":
        result = seeder.reset()
    else:
        result = seeder.seed()

    if not result.success:
        print(f"❌ Seeding failed: {result.error.message}")
        sys.exit(1)

    if not result.metadata.get("seeded"):
        print(f"ℹ️  Store already holds {result.data['employees']} employees, nothing written")
        return

    tasks = storage.get_tasks()
    print("✅ Demo data written")
    print(f"📊 Summary:")
    for employee in storage.get_employees():
        progress = calculate_progress(tasks.get(employee.id))
        print(
            f"   {employee.id} {employee.name:<18} "
            f"HR {progress.hr:>3}%  IT {progress.it:>3}%  Admin {progress.admin:>3}%  "
            f"Overall {progress.overall:>3}%"
        )


if __name__ == "__main__":
    main()
