"""Human-readable formatting for sizes and durations."""


def format_size(size: int) -> str:
    """
    Format a byte count as bytes, KB or MB.

    Args:
        size: Number of bytes.

    Returns:
        String such as "512 bytes", "1.50 KB" or "100.00 MB".
    """
    if size < 1024:
        return f"{size} bytes"
    elif size < 1024 * 1024:
        return f"{size / 1024:.2f} KB"
    else:
        return f"{size / (1024 * 1024):.2f} MB"


def format_elapsed(seconds: float) -> str:
    """
    Format a duration with two decimals and the largest unit that keeps it >= 1.

    Args:
        seconds: Elapsed wall-clock time in seconds.

    Returns:
        String such as "1.25s", "12.40ms", "3.00µs" or "250.00ns".
    """
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"
