import os

# Constants

RESET = "\033[0m"


def supports_true_color() -> bool:
    """
    Return True if the terminal claims to support 24-bit (true-color).
    We check COLORTERM and TERM for the usual markers.
    """
    # 1) Check COLORTERM
    ct = os.getenv("COLORTERM", "")
    if "truecolor" in ct.lower() or "24bit" in ct.lower():
        return True

    # 2) Check TERM
    term = os.getenv("TERM", "")
    if "truecolor" in term.lower() or "24bit" in term.lower():
        return True

    return False


def bg_color_3b(code: int) -> str:
    """
    Return the SGR background sequence for a basic code (40-47, 100-107).
    """
    return f"\033[{code}m"


def bg_color_24b(red: int, green: int, blue: int) -> str:
    return f"\033[48;2;{red};{green};{blue}m"


def colorize(glyph: str, color: str) -> str:
    """Wrap a glyph with a color token and the reset sequence."""
    return f"{color}{glyph}{RESET}"


if __name__ == "__main__":
    for code in [*range(41, 47), *range(100, 105)]:
        print(colorize(f" {code:3d} ", bg_color_3b(code)), end=" ")
    print()
    for i in range(100, 200, 50):
        for j in range(100, 200, 50):
            for k in range(100, 200, 50):
                print(colorize(f" {i:3d}, {j:3d}, {k:3d} ", bg_color_24b(i, j, k)), end=" ")
    print()
