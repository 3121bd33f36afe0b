from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from blog.schemas.site import SiteMetadata


class Post(BaseModel):
    slug: str
    title: Optional[str] = None
    date: str = ""
    description: Optional[str] = None
    excerpt: str = ""
    tags: List[str] = Field(default_factory=list)
    html: str = ""

    @property
    def display_title(self) -> str:
        return self.title or self.slug


class PostEdge(BaseModel):
    node: Post


class PostCollection(BaseModel):
    totalCount: int
    posts: List[Post] = Field(default_factory=list)

    @model_validator(mode="after")
    def _count_matches_posts(self):
        if self.totalCount != len(self.posts):
            raise ValueError(
                f"totalCount ({self.totalCount}) does not match number of posts ({len(self.posts)})"
            )
        return self

    @classmethod
    def of(cls, posts: List[Post]) -> "PostCollection":
        return cls(totalCount=len(posts), posts=list(posts))


class TagQueryResult(BaseModel):
    """Query-layer result for a single tag: ``{totalCount, edges: [{node}]}``."""

    totalCount: int
    edges: List[PostEdge] = Field(default_factory=list)

    def to_collection(self) -> PostCollection:
        return PostCollection(
            totalCount=self.totalCount, posts=[edge.node for edge in self.edges]
        )


class TagPageContext(BaseModel):
    tag: str = Field(min_length=1)
    slug: Optional[str] = None


class TagSummary(BaseModel):
    tag: str
    slug: str
    totalCount: int


class TagsPageData(BaseModel):
    site: SiteMetadata
    collection: PostCollection
