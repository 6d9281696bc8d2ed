from .check import check
from .env import env
from .log import log
from .probe import probe
from .version import version

__all__ = ["check", "env", "log", "probe", "version"]
