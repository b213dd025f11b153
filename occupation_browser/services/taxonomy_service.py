import logging
from dataclasses import dataclass, field
from typing import Iterable

from occupation_browser.schemas.occupation import GroupNode, Occupation, OccupationLeaf
from occupation_browser.services.category_service import group_name
from occupation_browser.utils.codes import parse_code

logger = logging.getLogger(__name__)


@dataclass
class _GroupBuilder:
    code: str
    subgroups: dict[str, "_GroupBuilder"] = field(default_factory=dict)
    occupations: list[Occupation] = field(default_factory=list)

    def subgroup(self, code: str) -> "_GroupBuilder":
        if code not in self.subgroups:
            self.subgroups[code] = _GroupBuilder(code)
        return self.subgroups[code]

    def build(self) -> GroupNode:
        children = [sub.build() for sub in self.subgroups.values()]
        children += [OccupationLeaf(occupation=o) for o in self.occupations]
        # Stable: occupations sharing a code keep their input order.
        children.sort(key=lambda child: child.code)
        return GroupNode(code=self.code, name=group_name(self.code), children=tuple(children))


def build_taxonomy(occupations: Iterable[Occupation]) -> list[GroupNode]:
    """
    Arrange occupations into major > sub-major > minor > unit groups.

    Each occupation hangs off the deepest group its code reaches, so a
    two-character code sits directly under its sub-major group. Occupations
    without a code are left out of the tree.
    """
    if occupations is None:
        raise TypeError("occupations must be an iterable of Occupation, not None")

    roots = _GroupBuilder("")
    placed = 0
    skipped = 0
    for occupation in occupations:
        prefixes = parse_code(occupation.code)
        if prefixes is None:
            skipped += 1
            logger.debug("Skipping occupation without a code: %r", occupation.key_id or occupation.preferred_label)
            continue
        node = roots
        for code in prefixes.levels():
            node = node.subgroup(code)
        node.occupations.append(occupation)
        placed += 1

    tree = sorted((group.build() for group in roots.subgroups.values()), key=lambda g: g.code)
    logger.info(
        "Built taxonomy: %d major groups, %d occupations placed, %d skipped without a code",
        len(tree), placed, skipped,
    )
    return tree
