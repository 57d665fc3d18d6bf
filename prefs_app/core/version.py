"""Build/version metadata.

Usually run from source; packaged builds inject metadata through environment
variables since git metadata is not available there.
"""

from __future__ import annotations

import os


def get_build_info() -> dict[str, str]:
    """Return build metadata.

    Environment variables (set by CI/build scripts):
    - PREFS_VERSION: human readable version (e.g. "1.2.0" or "0.0.0-dev")
    - PREFS_GIT_SHA: short git sha
    - PREFS_BUILD_DATE: ISO date (YYYY-MM-DD) or datetime
    """

    version = os.getenv("PREFS_VERSION", "0.1.0")
    sha = os.getenv("PREFS_GIT_SHA", "dev")
    build_date = os.getenv("PREFS_BUILD_DATE", "")
    return {"version": version, "git_sha": sha, "build_date": build_date}


def get_version_string() -> str:
    info = get_build_info()
    ver = info["version"].strip() or "0.1.0"
    sha = info["git_sha"].strip() or "dev"
    date = info["build_date"].strip()
    if date:
        return f"v{ver} ({sha}, {date})"
    return f"v{ver} ({sha})"
