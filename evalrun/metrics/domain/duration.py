"""Human-readable rendering of millisecond durations."""


def format_duration(ms: float) -> str:
    """Format ms as '850ms', '1.2s' or '1m 3.4s'."""
    if ms < 1000:
        return f"{round(ms)}ms"
    seconds = ms / 1000
    minutes, seconds = divmod(seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{seconds:.1f}s"
