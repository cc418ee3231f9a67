"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the lambda is running in local SAM, False otherwise.

Example:
    >>> from dynashort.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
"""

import os

from dynashort.constants import ENV


def running_locally() -> bool:
    """Check if the lambda is running locally via sam local invoke or a dev box"""
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'
