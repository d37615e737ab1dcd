import logging
import os
from datetime import datetime

import logzero
from logzero import logger


def setup_logger(logdir: str = "logs", level: int = logging.DEBUG, to_file: bool = True):
    now = datetime.now()
    timestamp_str = now.strftime("%Y-%m-%d_%H-%M-%S")

    log_format = "%(color)s[%(levelname)s %(asctime)-15s %(module)s:%(lineno)d]%(end_color)s %(message)s"
    formatter = logzero.LogFormatter(fmt=log_format, datefmt="%Y-%m-%d %H:%M:%S")
    logzero.setup_default_logger(formatter=formatter)
    if to_file:
        os.makedirs(logdir, exist_ok=True)
        log_filepath = os.path.join(logdir, f"{timestamp_str}.log")
        logzero.logfile(log_filepath)
    logger.setLevel(level)
    logger.info("Initialized logging.")
