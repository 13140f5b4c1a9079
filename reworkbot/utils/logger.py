import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from reworkbot.config import Config


class SecretRedactionFilter(logging.Filter):
    """Masks configured credentials in log messages.

    aiohttp errors embed the full request URL, and the osu! v1 API takes its
    key as a query parameter.
    """

    MASK = '***'

    def __init__(self, secrets: Iterable[Optional[str]]):
        super().__init__()
        self.secrets = [secret for secret in secrets if secret]

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True

        message = record.getMessage()
        redacted = message
        for secret in self.secrets:
            redacted = redacted.replace(secret, self.MASK)

        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logger(name: str, log_dir: Path = Path('logs')) -> logging.Logger:
    """Setup a logger with consistent formatting

    Records from child loggers (``reworkbot.services.*``) propagate to the
    handlers installed here, so calling this for the package name covers
    the whole bot.
    """

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    log_level = logging.DEBUG if Config.DEBUG else logging.INFO
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    redaction = SecretRedactionFilter([Config.OSU_API_KEY, Config.HUIS_ONION_KEY])

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(redaction)
    logger.addHandler(console_handler)

    # Daily log file, always at DEBUG
    log_dir.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / f'reworkbot_{datetime.now().strftime("%Y%m%d")}.log',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    file_handler.addFilter(redaction)
    logger.addHandler(file_handler)

    return logger
