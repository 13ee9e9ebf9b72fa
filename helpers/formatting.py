from typing import Iterable

from rich.text import Text


def human_format(num):
    num = float("{:.3g}".format(num))
    magnitude = 0
    while abs(num) >= 1000:
        magnitude += 1
        num /= 1000.0
    return "{}{}".format(
        "{:f}".format(num).rstrip("0").rstrip("."), ["", "K", "M", "B", "T"][magnitude]
    )


def human_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f} ms"
    return f"{seconds:.2f} s"


def pool_format(ids: Iterable[int]) -> Text:
    """Formats an id pool as ``{4, 1, 3}`` in pool order."""
    return Text("{" + ", ".join(str(i) for i in ids) + "}", style="magenta")


def path_format(labels: Iterable[str]) -> Text:
    """Formats a matched chain as ``1 → 3 → 4``."""
    parts = [Text(str(label), style="bold green") for label in labels]
    if not parts:
        return Text("-", style="dim")
    return Text(" → ", style="white").join(parts)
