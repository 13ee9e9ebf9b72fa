from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from treepath.annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY
from treepath.trace import TRACER_TYPES


class CategoryNode(BaseModel):
    id: int
    name: Optional[str] = None
    sub_categories: List["CategoryNode"] = Field(default_factory=list)

    def label(self) -> str:
        if self.name:
            return f"{self.id} ({self.name})"
        return str(self.id)


CategoryNode.model_rebuild()


class PoolOptions(BaseModel):
    ids: str = Field("", description="Comma separated ids; several pools separated by ';'.")

    def get_pool_list(self) -> List[List[int]]:
        pools = []
        for chunk in self.ids.split(";"):
            chunk = chunk.strip()
            if not chunk:
                continue
            try:
                pool = [int(s) for s in chunk.split(",") if s.strip()]
            except ValueError:
                raise ValueError(f"Invalid id pool: '{chunk}'")
            if not pool:
                raise ValueError(f"Invalid id pool: '{chunk}'")
            pools.append(pool)
        if not pools:
            raise ValueError("No id pool given")
        return pools


class FinderOptions(BaseModel):
    children_key: str = Field(
        DEFAULT_CHILDREN_KEY, description="Field holding the children of a node."
    )
    id_key: str = Field(DEFAULT_ID_KEY, description="Field holding the id of a node.")
    tracer: str = Field(
        "none", description="Trace sink: 'none', 'logging', 'rich' or 'recording'."
    )

    @field_validator("tracer")
    @classmethod
    def _check_tracer(cls, value: str) -> str:
        if value not in TRACER_TYPES:
            raise ValueError(f"Unknown tracer type: {value}")
        return value


class VisualizeOptions(BaseModel):
    visualize_terminal: bool = Field(
        False, description="Render the tree in the terminal with the matched path highlighted."
    )
    max_depth: Optional[int] = Field(None, description="Deepest level rendered in the tree view.")


class TreeBundle(BaseModel):
    roots: List[CategoryNode]
    description: str = ""
    default_ids: str = ""
    finder_options: FinderOptions = Field(default_factory=FinderOptions)
