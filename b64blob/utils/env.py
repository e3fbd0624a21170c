import os
from typing import Any

from b64blob.utils.logger import logger


def get_env_var(var_name: str, default_value: Any = None):
    """Retrieves the value of an environment variable.

    Args:
        var_name (str): The name of the environment variable to retrieve.
        default_value (Any, optional): The value to return if the environment variable
            is not set. Defaults to None.

    Returns:
        str | Any: The value of the environment variable, or `default_value`.

    Examples:
        >>> get_env_var("B64BLOB_MAX_PREALLOCATION", 4096)
        4096
    """
    value = os.environ.get(var_name, default_value)

    if value is None:
        logger.warning(f"Environment variable '{var_name}' not found")

    return value
