import sys
import logging

from ytdigest.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = config.LOG_DIR
loging_path = logging_dir / "ytdigest.log"
logging_dir.mkdir(parents=True, exist_ok=True)

logging.basicConfig(
    level=getattr(logging, getattr(config, "LOG_LEVEL", "INFO")),
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path, encoding="utf-8"),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('ytdigest')
