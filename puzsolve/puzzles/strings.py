import string

from puzsolve.core.configuration import Configuration, config_dataclass

ALPHABET = string.ascii_uppercase


def shift_letter(letter: str, offset: int) -> str:
    """Move ``letter`` by ``offset`` places, wrapping from Z to A and back."""
    return ALPHABET[(ALPHABET.index(letter) + offset) % len(ALPHABET)]


@config_dataclass
class StringsConfig(Configuration):
    """
    Turn ``current`` into ``finish`` by stepping one character at a time.

    Every character is a letter ``A``..``Z``; a step moves exactly one of them to
    the previous or the next letter of the cyclic alphabet.
    """

    current: str
    finish: str

    def __post_init__(self):
        for name in ("current", "finish"):
            value = getattr(self, name)
            if any(letter not in ALPHABET for letter in value):
                raise ValueError(f"{name} may only contain letters A-Z, got {value!r}")

    def is_goal(self) -> bool:
        return self.current == self.finish

    def successors(self) -> tuple["StringsConfig", ...]:
        """For each position left to right: previous letter, then next letter."""
        neighbours = []
        for index, letter in enumerate(self.current):
            head, tail = self.current[:index], self.current[index + 1 :]
            for offset in (-1, 1):
                neighbours.append(
                    StringsConfig(head + shift_letter(letter, offset) + tail, self.finish)
                )
        return tuple(neighbours)

    def __str__(self) -> str:
        return self.current
