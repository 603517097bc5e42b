from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class BlueprintRequest(BaseModel):
    requirements: Optional[str] = None  # blank is rejected by the route


class PlanningData(BaseModel):
    blueprint: Dict[str, Any]
    raw_output: str = Field(alias="rawOutput")

    model_config = {"populate_by_name": True}


class PlanningResponse(BaseModel):
    """Wire envelope returned to the caller"""
    success: bool
    data: Optional[PlanningData] = None
    error: Optional[str] = None
    warnings: List[str] = []
