"""
Blog Backend: Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the JSON contract of the posts API.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by the posts routes, the post service and the view-layer client.

The response shape is exactly the four columns of the `posts` table.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(BaseModel):
    """
    What:  Body of POST /api/posts.

    Both fields are optional at the HTTP layer. A missing title or content
    reaches the insert as NULL and is rejected by the table's NOT NULL
    constraint, which surfaces as a storage error.
    """
    title: Optional[str] = Field(default=None, description="Post title")
    content: Optional[str] = Field(default=None, description="Post body text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  A post row as stored.
    Who:   Returned by every posts route (as an object or inside an array).
    """
    id: int = Field(description="Sequential identifier assigned by the database")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body text")
    created_at: datetime = Field(description="When the post was created (UTC)")

    model_config = {"from_attributes": True}
