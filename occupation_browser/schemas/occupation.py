from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Occupation(BaseModel):
    model_config = ConfigDict(frozen=True)

    key_id: str = ""
    code: str = ""
    preferred_label: str = ""
    alternate_designations: str = ""  # newline-delimited
    description: str = ""
    isco_tax_included: str = ""
    definition: str = ""
    scope_note: str = ""
    regulated_profession_note: str = ""
    occupation_type: str = ""
    isco_group_code: str = ""
    status: str = ""
    user_link: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _blank_if_missing(cls, value):
        return "" if value is None else value

    @property
    def alternate_labels(self) -> list[str]:
        return [line.strip() for line in self.alternate_designations.splitlines() if line.strip()]


class OccupationLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["occupation"] = "occupation"
    occupation: Occupation

    @property
    def code(self) -> str:
        return self.occupation.code


class GroupNode(BaseModel):
    """One level of the classification: major, sub-major, minor or unit group."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    code: str
    name: str
    children: tuple["TaxonomyNode", ...] = ()

    def iter_occupations(self) -> Iterator[Occupation]:
        for child in self.children:
            if child.kind == "group":
                yield from child.iter_occupations()
            else:
                yield child.occupation

    @property
    def occupation_count(self) -> int:
        return sum(1 for _ in self.iter_occupations())


TaxonomyNode = Annotated[Union[GroupNode, OccupationLeaf], Field(discriminator="kind")]

GroupNode.model_rebuild()
