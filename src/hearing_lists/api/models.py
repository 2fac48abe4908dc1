from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from hearing_lists.rendering.renderer import RenderOptions
from hearing_lists.search.engine import SearchFilters


class CaseQuery(BaseModel):
    q: Optional[str] = Field(default=None, max_length=200)
    postcode: List[str] = Field(default_factory=list, max_length=50)
    prosecutor: List[str] = Field(default_factory=list, max_length=50)
    page: int = Field(default=1, ge=1)

    def filters(self) -> SearchFilters:
        return SearchFilters.build(self.q, self.postcode, self.prosecutor)


class RenderQuery(BaseModel):
    locale: Optional[str] = Field(default=None, max_length=10)
    content_date: Optional[date] = None
    last_received: Optional[str] = Field(default=None, max_length=40)
    location_name: Optional[str] = Field(default=None, max_length=200)

    def options(self, default_locale: str) -> RenderOptions:
        return RenderOptions(
            locale=self.locale or default_locale,
            content_date=self.content_date,
            last_received=self.last_received,
            location_name=self.location_name,
        )
