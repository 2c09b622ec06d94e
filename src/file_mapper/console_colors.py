"""ANSI styling for terminal output."""


class ConsoleColors:
    """Wraps text in ANSI escape codes, or passes it through when disabled.

    One instance is created per run so that color can be switched off for
    non-terminal output, for NO_COLOR, or on request.

    Example:
        >>> ConsoleColors(enabled=False).directory("src/")
        'src/'
        >>> ConsoleColors().error("boom")
        '\\x1b[31mboom\\x1b[0m'
    """

    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    GRAY = "\033[90m"

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def colorize(self, text: str, style: str) -> str:
        if not self.enabled:
            return text
        return f"{style}{text}{self.RESET}"

    def directory(self, text: str) -> str:
        return self.colorize(text, self.BOLD + self.YELLOW)

    def file(self, text: str) -> str:
        return self.colorize(text, self.WHITE)

    def symlink(self, text: str) -> str:
        return self.colorize(text, self.CYAN)

    def size(self, text: str) -> str:
        return self.colorize(text, self.GRAY)

    def info(self, text: str) -> str:
        return self.colorize(text, self.GRAY)

    def heading(self, text: str) -> str:
        return self.colorize(text, self.BOLD)

    def error(self, text: str) -> str:
        return self.colorize(text, self.RED)

    def success(self, text: str) -> str:
        return self.colorize(text, self.GREEN)

    def warning(self, text: str) -> str:
        return self.colorize(text, self.YELLOW)
