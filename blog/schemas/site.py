from typing import Optional

from pydantic import BaseModel


class Author(BaseModel):
    name: str
    summary: Optional[str] = None


class Social(BaseModel):
    twitter: Optional[str] = None


class SiteMetadata(BaseModel):
    title: str
    description: Optional[str] = None
    siteUrl: Optional[str] = None
    author: Optional[Author] = None
    social: Social = Social()
