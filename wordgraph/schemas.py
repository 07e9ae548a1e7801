# wordgraph/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional, Dict


class WordNode(BaseModel):
    id: str
    out_degree: int = Field(ge=0, default=0)
    in_degree: int = Field(ge=0, default=0)
    pagerank: Optional[float] = Field(ge=0, default=None)

class WordEdge(BaseModel):
    source: str
    target: str
    weight: int = Field(ge=1)

class WordGraphPayload(BaseModel):
    source_name: str = "unknown"
    nodes: List[WordNode]
    edges: List[WordEdge]
    meta: Dict[str, str] = {}

class PathResult(BaseModel):
    source: str
    target: str
    path: List[str]
    length: int = Field(ge=0)
