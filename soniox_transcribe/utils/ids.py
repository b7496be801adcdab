from __future__ import annotations

import time
from uuid import uuid4


def generate_id(prefix: str) -> str:
    """Return a unique id such as ``soniox-1718000000000-3f2a9c1b``."""
    return f"{prefix}-{int(time.time() * 1000)}-{uuid4().hex[:8]}"
