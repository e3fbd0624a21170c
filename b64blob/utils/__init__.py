from .env import get_env_var
from .logger import logger
