import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: int = logging.INFO) -> None:
    # applied to the root logger, which every module logger inherits from
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        force=True,
    )
