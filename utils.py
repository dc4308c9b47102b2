from typing import Iterable, List

class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'
    ENDC = '\033[0m'

BANNER_WIDTH = 60
RULE = "─" * BANNER_WIDTH

def center_text(text: str, width: int) -> str:
    """Pad ``text`` with spaces to sit centered in ``width`` columns.

    Text at least as wide as ``width`` is returned unchanged; an odd leftover
    space goes on the right.
    """
    if len(text) >= width:
        return text
    left = (width - len(text)) // 2
    right = width - len(text) - left
    return " " * left + text + " " * right

def banner(lines: Iterable[str], width: int = BANNER_WIDTH) -> List[str]:
    """Box-drawn banner with each line centered."""
    rows = ["╔" + "═" * width + "╗"]
    rows.extend("║" + center_text(line, width) + "║" for line in lines)
    rows.append("╚" + "═" * width + "╝")
    return rows
