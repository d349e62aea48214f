"""Human-readable renderings of durations."""


def format_duration(seconds: int) -> str:
    """Format a duration as `"2m 30s"`, `"2m"` or `"45s"`."""
    minutes, secs = divmod(int(seconds), 60)
    if minutes > 0:
        return f"{minutes}m {secs}s" if secs > 0 else f"{minutes}m"
    return f"{secs}s"


def format_clock(seconds: float) -> str:
    """Format elapsed seconds as a `M:SS` clock, e.g. `"12:05"`."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"
