"""Space client operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fabric8_kube.domains.spaces.models import Space

if TYPE_CHECKING:
    from fabric8_kube.interfaces import BuildConfigSource

logger = logging.getLogger(__name__)


class SpaceClient:
    """Client for space operations."""

    def __init__(self, build_configs: BuildConfigSource) -> None:
        self._build_configs = build_configs

    def get_space(self, space_id: str) -> Space:
        """Get a space with one application per build config.

        A space without build configs yields an empty application list.
        """
        configs = self._build_configs.get_build_configs(space_id)
        applications = list(configs or [])
        logger.debug(f"Space '{space_id}' has {len(applications)} application(s)")
        return Space(applications=applications)
