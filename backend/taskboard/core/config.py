import os
from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# Actor stamped into created_by / updated_by when the caller names none
DEFAULT_ACTOR: str = os.getenv("DEFAULT_ACTOR", "system")

TASK_TITLE_MAX_LENGTH: int = int(os.getenv("TASK_TITLE_MAX_LENGTH", "200"))

# When on, only pending -> approved | rejected is allowed
STRICT_STATUS_TRANSITIONS: bool = _env_flag("STRICT_STATUS_TRANSITIONS")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
