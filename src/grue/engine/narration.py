"""Message accumulator threaded through handlers, daemons and actors."""


class Narration:
    """Collects output lines in the order they are produced."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def say(self, text: str) -> None:
        if text:
            self.lines.append(text)

    def extend(self, other: "Narration") -> None:
        self.lines.extend(other.lines)

    def text(self) -> str:
        return "\n".join(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)
