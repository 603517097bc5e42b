from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ---- Documented vocabularies (reported by the audit, never enforced) ----

NODE_TYPES = (
    "client",
    "server",
    "database",
    "api",
    "service",
    "integration",
    "auth",
    "page",
    "component",
)

NODE_CATEGORIES = ("Frontend", "Backend", "Database", "Integration", "Auth")

EDGE_TYPES = ("http", "websocket", "database", "event")


class _BlueprintModel(BaseModel):
    # Model output is loosely typed: keep unknown keys, accept numeric ids
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# ---- Workflow graph ----

class WorkflowNode(_BlueprintModel):
    id: str
    type: str       # one of NODE_TYPES
    label: str      # short display name
    category: str   # one of NODE_CATEGORIES


class WorkflowEdge(_BlueprintModel):
    id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    label: Optional[str] = None
    type: Optional[str] = None  # one of EDGE_TYPES


class Workflow(_BlueprintModel):
    nodes: List[WorkflowNode]
    edges: List[WorkflowEdge] = Field(default_factory=list)


# ---- Free-form implementation context ----

class DetailedContext(_BlueprintModel):
    project_overview: Any = Field(default="", alias="projectOverview")
    architecture_explanation: Any = Field(default="", alias="architectureExplanation")
    node_details: Any = Field(default_factory=dict, alias="nodeDetails")
    edge_details: Any = Field(default_factory=dict, alias="edgeDetails")
    file_structure: Any = Field(default_factory=dict, alias="fileStructure")
    database_schema: Any = Field(default_factory=dict, alias="databaseSchema")
    api_specification: Any = Field(default_factory=dict, alias="apiSpecification")
    component_specification: Any = Field(default_factory=dict, alias="componentSpecification")
    integrations: Any = Field(default_factory=list)
    authentication: Any = Field(default_factory=dict)
    deployment: Any = Field(default_factory=dict)


# ---- Root document ----

class Blueprint(_BlueprintModel):
    project_name: str = Field(alias="projectName")
    workflow: Workflow
    detailed_context: DetailedContext = Field(
        default_factory=DetailedContext,
        alias="detailedContext",
    )

    # Pass-through content; shape is up to the model
    description: Optional[Any] = None
    tech_stack: Optional[Any] = Field(default=None, alias="techStack")
    features: Optional[Any] = None
    phases: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: camelCase keys, only what the model output contained."""
        return self.model_dump(by_alias=True, exclude_unset=True)
