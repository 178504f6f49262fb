from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    web_mode: bool = _flag(os.getenv("GRADEPOINT_WEB", "0"))
    port: int = int(os.getenv("PORT", "8550"))

    layout: str = os.getenv("GRADEPOINT_LAYOUT", "flat").strip().lower()

    report_dir: str = os.getenv("GRADEPOINT_REPORT_DIR", "reports")
    report_filename: str = os.getenv("GRADEPOINT_REPORT_FILENAME", "gpa_report.txt")

    log_level: str = os.getenv("GRADEPOINT_LOG_LEVEL", "INFO").upper()


settings = Settings()
