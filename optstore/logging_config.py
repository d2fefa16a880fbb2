import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """为宿主应用配置根日志器。optstore 自身在导入时不会添加任何 handler。

    level 缺省时读取 LOG_LEVEL（默认 INFO），log_file 缺省时读取 LOG_FILE_PATH。
    根日志器已有 handler 时不做任何修改。
    """
    logging.captureWarnings(True)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel((level or os.getenv("LOG_LEVEL", "INFO")).upper())

    fmt = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(sh)

    log_file = log_file or os.getenv("LOG_FILE_PATH")
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)
