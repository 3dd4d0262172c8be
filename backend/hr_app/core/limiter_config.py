from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Global Limiter instance to be imported by controllers.
# Enablement and storage come from the app config (RATELIMIT_ENABLED,
# RATELIMIT_STORAGE_URI) when create_app() calls limiter.init_app().
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["200 per hour", "50 per minute"],
)

READ_LIMIT = "100 per minute"
WRITE_LIMIT = "30 per minute"
