"""
Pydantic model for commits.

A commit records a single git commit of interest: its message, the
URL of the commit page, the GitHub login of its author and the
commit timestamp.  The timestamp must carry a zone offset
(e.g. ``2022-04-20T15:50:10-07:00``).
"""

from typing import Optional

from pydantic import AwareDatetime, BaseModel, Field

from .common import CAMEL_CASE_CONFIG


class Commit(BaseModel):
    model_config = CAMEL_CASE_CONFIG

    id: Optional[int] = None
    message: str = Field(..., examples=["Fix typo in README"])
    url: str = Field(..., examples=["https://github.com/ucsb-cs156/proj-courses/commit/5a1f3b2"])
    author_login: str = Field(..., examples=["pconrad"])
    commit_time: AwareDatetime = Field(..., examples=["2022-04-20T15:50:10-07:00"])
