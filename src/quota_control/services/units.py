from __future__ import annotations

# P is intentionally absent from the ladder.
SIZES: tuple[str, ...] = ("K", "M", "G", "T", "Y", "Z", "E")


def human_readable(value: int, is_bytes: bool) -> str:
    """Render a block or inode count with binary prefixes.

    human_readable(512, False) -> "512", human_readable(512, True) -> "512 B",
    human_readable(1536, True) -> "1.50 KB", human_readable(4194304, True) -> "4 MB".
    """
    if value < 0:
        raise ValueError(f"negative quota value: {value}")

    suffix = "B" if is_bytes else ""
    if value < 1024:
        return f"{value} {suffix}" if suffix else str(value)

    v = float(value)
    steps = 0
    while v >= 1024.0 and steps < len(SIZES):
        v /= 1024.0
        steps += 1

    unit = SIZES[steps - 1]
    if v.is_integer():
        return f"{v:.0f} {unit}{suffix}"
    return f"{v:.2f} {unit}{suffix}"
