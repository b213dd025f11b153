from typing import NamedTuple


class CodePrefixes(NamedTuple):
    major: str | None
    sub_major: str | None
    minor: str | None
    unit: str | None

    def levels(self) -> list[str]:
        return [prefix for prefix in self if prefix is not None]

    @property
    def deepest(self) -> str:
        return self.levels()[-1]


def parse_code(code: str | None) -> CodePrefixes | None:
    """Split an ISCO-style code such as "2512.1" into its 1-4 character group prefixes.

    Only the part before the first "." counts. Characters are sliced as-is,
    so non-numeric codes still produce prefixes. Returns None when there is
    nothing to group by.
    """
    if not code:
        return None
    main = code.split(".", 1)[0]
    if not main:
        return None
    return CodePrefixes(*(main[:n] if len(main) >= n else None for n in (1, 2, 3, 4)))
