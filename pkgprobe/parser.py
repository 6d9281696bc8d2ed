from typing import NamedTuple

FLAG_WIDTH = 2


class FlagToken(NamedTuple):
    flag: str
    value: str


class FlagTokens:
    """
    Lazy view of the flag tokens in a pkg-config output string.

    Every iteration splits the output afresh, so the same object can be
    walked any number of times.
    """

    def __init__(self, output: str):
        self.output = output

    def __iter__(self):
        for word in self.output.split(" "):
            if len(word) <= FLAG_WIDTH:
                continue
            yield FlagToken(word[:FLAG_WIDTH], word[FLAG_WIDTH:])

    def __repr__(self):
        return f"FlagTokens({self.output!r})"


def parse_flags(output: str) -> FlagTokens:
    """Splits pkg-config output into (flag, value) tokens such as ('-L', '/usr/lib')."""
    return FlagTokens(output)


def find_frameworks(output: str) -> list[str]:
    """Returns the names that follow each ``-framework`` word, in order."""
    frameworks = []
    words = iter(output.split(" "))
    for word in words:
        if word != "-framework":
            continue
        name = next(words, None)
        if name is not None:
            frameworks.append(name)
    return frameworks
