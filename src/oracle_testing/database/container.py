"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Docker lifecycle of the Oracle test container.
"""
# spell-checker: ignore gvenzl

import logging
import time
from typing import Optional

import docker
from docker.errors import DockerException, NotFound
from docker.models.containers import Container

from oracle_testing.config import Settings

LOGGER = logging.getLogger(__name__)

ORACLE_PORT = "1521/tcp"
READY_LOG_MARKER = "DATABASE IS READY TO USE!"


def wait_for_container_ready(
    container: Container,
    ready_output: str = READY_LOG_MARKER,
    since: Optional[int] = None,
    timeout: int = 200,
) -> None:
    """Wait for container to be ready by checking its logs with exponential backoff.

    Args:
        container: Docker container to monitor
        ready_output: String to look for in logs indicating readiness
        since: Unix timestamp to filter logs from (optional)
        timeout: Maximum seconds to wait

    Raises:
        TimeoutError: If container doesn't become ready within timeout
        DockerException: If there's an error getting container logs
    """
    start_time = time.time()
    retry_interval = 2

    while time.time() - start_time < timeout:
        try:
            logs = container.logs(tail=100, since=since).decode("utf-8", errors="ignore")
            if ready_output in logs:
                LOGGER.info("Container %s is ready", container.name)
                return
        except DockerException as e:
            container.remove(force=True)
            raise DockerException(f"Failed to get container logs: {str(e)}") from e

        time.sleep(retry_interval)
        retry_interval = min(retry_interval * 2, 10)

    container.remove(force=True)
    raise TimeoutError(f"Container {container.name} did not become ready within {timeout}s")


def container_host_port(container: Container) -> int:
    """Return the host port published for the Oracle listener."""
    container.reload()
    bindings = (container.ports or {}).get(ORACLE_PORT)
    if not bindings:
        raise DockerException(f"Container {container.name} does not publish {ORACLE_PORT}")
    return int(bindings[0]["HostPort"])


def _find_existing(client: docker.DockerClient, name: str) -> Optional[Container]:
    try:
        return client.containers.get(name)
    except NotFound:
        return None


def _remove_existing(container: Container) -> None:
    try:
        container.remove(force=True)
    except DockerException as e:
        LOGGER.warning("Failed to remove stale container %s: %s", container.name, e)


def start_container(settings: Settings) -> Container:
    """Start the Oracle container, or reuse a running one with the same name.

    A reused container is returned as is; it is never removed here. Its
    readiness is left to the caller's query polling.

    Raises:
        DockerException: If Docker is not available or the run fails
        TimeoutError: If a new database does not report readiness in time
    """
    client = docker.from_env()
    existing = _find_existing(client, settings.container_name)

    if existing is not None:
        if settings.container_reuse and existing.status == "running":
            LOGGER.info("Reusing running container %s", existing.name)
            return existing
        _remove_existing(existing)

    LOGGER.info("Starting container %s from %s", settings.container_name, settings.container_image)
    container = client.containers.run(
        settings.container_image,
        name=settings.container_name,
        environment={
            "ORACLE_PASSWORD": settings.container_password,
            "APP_USER": settings.container_username,
            "APP_USER_PASSWORD": settings.container_password,
        },
        ports={ORACLE_PORT: settings.container_port},
        detach=True,
    )
    wait_for_container_ready(container, timeout=settings.startup_timeout)
    return container


def stop_container(container: Container) -> None:
    """Stop and remove the container, logging failures."""
    try:
        container.stop(timeout=30)
        container.remove()
    except DockerException as e:
        LOGGER.warning("Failed to cleanup database container: %s", e)
