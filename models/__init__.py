from __future__ import annotations
from typing import List
from pydantic import BaseModel, Field

# Column order of the combined grammar; index i here is index i in field_lengths.
FIELD_NAMES = (
    "host",
    "client_identity",
    "user_id",
    "date_time",
    "http_method",
    "requested_url",
    "http_protocol_version",
    "http_status_code",
    "response_body_size",
    "referrer_url",
    "agent",
    "code",
)
FIELD_COUNT = len(FIELD_NAMES)

class ParsedLogLine(BaseModel):
    host: str
    client_identity: str
    user_id: str
    date_time: str = Field(..., description="DD/Mon/YYYY:HH:MM:SS +ZZZZ, kept as text")
    http_method: str
    requested_url: str
    http_protocol_version: str
    http_status_code: int
    response_body_size: int
    referrer_url: str
    agent: str
    code: int
    field_lengths: List[int] = Field(default_factory=list, description="Captured text length per column")
