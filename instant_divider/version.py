"""Version management for Instant Divider."""

import subprocess
from pathlib import Path

# Base version (update manually at milestones)
__version_base__ = "1.0"


def get_version() -> str:
    """Get full version string: base.commit_count (e.g., 1.0.12)."""
    try:
        result = subprocess.run(
            ["git", "rev-list", "--count", "HEAD"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent,
            timeout=5,
        )
        if result.returncode == 0:
            commit_count = result.stdout.strip()
            return f"{__version_base__}.{commit_count}"
    except (OSError, subprocess.SubprocessError):
        pass

    return f"{__version_base__}.0"


__version__ = get_version()
