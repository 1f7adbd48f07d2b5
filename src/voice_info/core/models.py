from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class VoiceInfo:
    """Voice metadata record as returned by the remote service."""

    voice_id: Optional[str]
    name: Optional[str]
    category: Optional[str]
    description: Optional[str]
    labels: Mapping[str, str] = field(default_factory=dict)
    preview_url: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_api(data: Mapping[str, Any]) -> "VoiceInfo":
        return VoiceInfo(
            voice_id=data.get("voice_id"),
            name=data.get("name"),
            category=data.get("category"),
            description=data.get("description"),
            labels=data.get("labels") or {},
            preview_url=data.get("preview_url"),
            raw=dict(data),
        )
