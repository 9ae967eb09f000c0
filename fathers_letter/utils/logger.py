import logging
from fathers_letter.config import settings

def setup_logger(level: str = None):
    """設定服務記錄器"""

    level_name = (level or settings.log_level).upper()

    # 記錄器建立
    logger = logging.getLogger("fathers_letter")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # 已有 handler 時避免重複
    if logger.handlers:
        return logger

    # 層級由 logger 控制，create_app 可再調整
    console_handler = logging.StreamHandler()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    return logger

# 全域記錄器
logger = setup_logger()
