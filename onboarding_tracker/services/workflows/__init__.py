"""
Workflow Services

Process-level routines that coordinate several domain services, such as
initial demo data seeding.
"""

from .demo_seeder import DemoDataSeeder

__all__ = [
    'DemoDataSeeder'
]
