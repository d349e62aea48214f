"""Load environment variables early for the FastAPI app.

For local dev, loads a .env.dev file. In staging and prod, env vars are
injected by the deployment, so no .env file is loaded.
"""

import os
from typing import Literal
from dotenv import load_dotenv

EnvironmentName = Literal["dev", "staging", "prod"]

DEFAULT_UPCOMING_ENTRIES_COUNT = 5


# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from deployment)")
elif env == "dev":
    load_dotenv(".env.dev")
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")


def get_upcoming_entries_count() -> int:
    """How many upcoming entries a session view shows (UPCOMING_ENTRIES_COUNT)."""
    raw = os.getenv("UPCOMING_ENTRIES_COUNT")
    if raw is None:
        return DEFAULT_UPCOMING_ENTRIES_COUNT
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"Invalid UPCOMING_ENTRIES_COUNT value: {raw!r}") from None
    if count < 0:
        raise ValueError(f"UPCOMING_ENTRIES_COUNT must not be negative, got {count}")
    return count
