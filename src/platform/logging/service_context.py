"""
Service context tag prepended to every log line.

Format: ``<service>@<deploy_env>:<instance>`` where instance is the container
hostname when running in a container, otherwise the local PID.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'clubverse')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Docker/Kubernetes set HOSTNAME to the container id / pod name
    instance = os.getenv('HOSTNAME', '')[:12] if os.path.exists('/.dockerenv') else ''
    if not instance:
        instance = str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
