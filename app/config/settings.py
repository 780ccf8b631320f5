from pathlib import Path
from dotenv import load_dotenv
import os
import pytz

load_dotenv(Path(__file__).parent.parent / '.env', override=True)

def env_list(name: str, sep: str = ",") -> list:
    return [x.strip() for x in os.getenv(name, "").split(sep) if x.strip()]

def system_locales() -> list:
    """
    Ordered locale preferences of the host, POSIX style.

    LANGUAGE holds a colon-separated priority list; otherwise the first of
    LC_ALL / LC_NUMERIC / LANG that is set. 'C' and 'POSIX' carry no language.
    """
    candidates = env_list("LANGUAGE", ":")
    if not candidates:
        for name in ("LC_ALL", "LC_NUMERIC", "LANG"):
            value = os.getenv(name, "").strip()
            if value:
                candidates = [value]
                break
    return [c for c in candidates if c.split(".")[0] not in {"C", "POSIX"}]

def resolve_base_dir(source_root: Path) -> Path:
    """
    Directory that holds runtime storage (logs).

    A source checkout (pyproject.toml next to app/) keeps storage inside the
    checkout; an installed copy lives in site-packages, so the working
    directory is used instead.
    """
    if (source_root / "pyproject.toml").is_file():
        return source_root
    return Path.cwd()

class Settings:
    # Timezone
    SERVER_TZ = pytz.timezone(os.getenv('SERVER_TZ')) if os.getenv('SERVER_TZ') else pytz.UTC

    # Locale
    DEFAULT_LOCALE = os.getenv('DEFAULT_LOCALE', 'en_US')
    PREFERRED_LOCALES = env_list('PREFERRED_LOCALES') or system_locales()

    # Formatting defaults
    DEFAULT_DECIMALS = int(os.getenv('DEFAULT_DECIMALS', 3))
    DEFAULT_DELIMITER = ", "

    # Directories
    BASE_DIR = resolve_base_dir(Path(__file__).resolve().parent.parent.parent)
    STORAGE_DIR = BASE_DIR / "storage"

    # Logs
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOGS_DIR = Path(os.getenv('LOGS_DIR')) if os.getenv('LOGS_DIR') else STORAGE_DIR / "logs"
    LOG_FILE = LOGS_DIR / "errors.log"
