"""
Store Mocks

In-process stand-ins for the external key-value store, used by the test
suite and by the default development configuration.

```python
from onboarding_tracker.mocks import MemoryStore
from onboarding_tracker.core.storage import OnboardingStorage

storage = OnboardingStorage(MemoryStore())
storage.save_theme("dark")
```
"""

from .memory_store import MemoryStore

__all__ = [
    'MemoryStore'
]
