from dynashort.utils.config import app_env, app_name, app_prefix, load_config
from dynashort.utils.helpers import get_short_url, is_absolute_url, require_environment, guarantee_500_response
from dynashort.utils.shortener import generate_shortcode, is_valid_shortcode
from dynashort.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'is_valid_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'get_short_url',
    'is_absolute_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
