from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    # Ensure `import ssescope` / `import ssescope_api` work without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    for d in (repo_root / "src", repo_root / "apps" / "viewer_api"):
        if d.exists() and str(d) not in sys.path:
            sys.path.insert(0, str(d))
