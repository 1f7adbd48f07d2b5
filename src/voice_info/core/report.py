from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, TextIO

from voice_info.core.interfaces import VoiceLookupProvider
from voice_info.core.metrics import Timer
from voice_info.core.models import VoiceInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """One printed line: a label and the VoiceInfo attribute it shows."""

    label: str
    attribute: str


_COMMON_FIELDS = (
    FieldSpec("Voice Name", "name"),
    FieldSpec("Voice Category", "category"),
    FieldSpec("Voice Description", "description"),
)

LABELS_FIELDS: tuple[FieldSpec, ...] = _COMMON_FIELDS + (FieldSpec("Voice Labels", "labels"),)
PREVIEW_FIELDS: tuple[FieldSpec, ...] = _COMMON_FIELDS + (
    FieldSpec("Voice Preview URL", "preview_url"),
)

FIELD_SETS: dict[str, tuple[FieldSpec, ...]] = {
    "labels": LABELS_FIELDS,
    "preview": PREVIEW_FIELDS,
}


def get_field_set(name: str) -> tuple[FieldSpec, ...]:
    key = (name or "").strip().lower()
    try:
        return FIELD_SETS[key]
    except KeyError:
        raise ValueError(f"Unknown field set: {name}") from None


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Mapping):
        return ", ".join(f"{k}: {v}" for k, v in value.items())
    return str(value)


def one_line(exc: BaseException) -> str:
    return " ".join(str(exc).split())


def render_lines(voice: VoiceInfo, fields: Sequence[FieldSpec]) -> list[str]:
    return [f"{f.label}: {format_value(getattr(voice, f.attribute, None))}" for f in fields]


def report_voice(
    provider: VoiceLookupProvider,
    voice_id: str,
    fields: Sequence[FieldSpec] = PREVIEW_FIELDS,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """
    Look up one voice and print the selected fields.

    Any lookup failure is reported as a single ``Error: <message>`` line on
    ``err`` and swallowed. Returns True when the report was printed.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    timer = Timer()
    try:
        voice = timer.measure("lookup_ms", lambda: provider.get_voice(voice_id))
    except Exception as e:
        logger.debug("Voice lookup for %s failed", voice_id, exc_info=True)
        print(f"Error: {one_line(e)}", file=err)
        return False

    for line in render_lines(voice, fields):
        print(line, file=out)
    return True
