import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    """``agentair@local_dev:4242``, prefixed to every log line"""
    return '{}@{}:{}'.format(
        os.getenv('SERVICE_NAME', 'agentair'),
        os.getenv('DEPLOY_ENV', 'local_dev'),
        os.getpid(),
    )
