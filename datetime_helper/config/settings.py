from pathlib import Path
from dotenv import load_dotenv
import os
import pytz

load_dotenv(Path(__file__).parent.parent / '.env')

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

class Settings:
    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_FILE = Path(os.getenv('LOG_FILE')) if os.getenv('LOG_FILE') else None
    LOG_TO_CONSOLE = env_bool("LOG_TO_CONSOLE", True)

    # Timezone used to read "today"; None means host local time
    SERVER_TZ = pytz.timezone(os.getenv('SERVER_TZ')) if os.getenv('SERVER_TZ') else None
