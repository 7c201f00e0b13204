from __future__ import annotations

import logging
from typing import Optional, Sequence

from google import genai
from google.genai import types

from ..attendance.model import AttendanceRecord
from ..core.constants import SUMMARY_RECORD_LIMIT

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = "Anda adalah asisten administrasi sekolah yang cerdas dan suportif."

FAILED_MESSAGE = "Maaf, gagal menghasilkan analisa saat ini."


def build_prompt(records: Sequence[AttendanceRecord]) -> str:
    lines = "\n".join(f"- {r.student_name} ({r.class_name}): {r.status.value}" for r in records)
    return (
        "Berikut adalah data absensi hari ini:\n"
        f"{lines}\n\n"
        "Tolong berikan ringkasan singkat dalam Bahasa Indonesia yang ramah tentang tingkat kehadiran "
        "kelas ini dan saran tindak lanjut jika ada siswa yang tidak hadir (Alpa/Sakit)."
    )


class InsightService:
    """Short AI summary of an attendance set (Gemini).

    ``summarize`` never raises: no records, no client or an API error all give None.
    """

    def __init__(self, client: Optional[genai.Client], *, model: str, limit: int = SUMMARY_RECORD_LIMIT):
        self._client = client
        self._model = model
        self._limit = int(limit)

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def summarize(self, records: Sequence[AttendanceRecord]) -> Optional[str]:
        if not records:
            return None
        if self._client is None:
            logger.warning("GEMINI_API_KEY not set; skipping attendance summary")
            return None

        prompt = build_prompt(list(records)[: self._limit])
        try:
            response = self._client.models.generate_content(
                model=self._model,
                contents=prompt,
                config=types.GenerateContentConfig(system_instruction=SYSTEM_INSTRUCTION),
            )
        except Exception:
            logger.exception("Gemini insight error")
            return None

        return response.text or None
