"""
GoodData client - Application layer wrapping common API actions.
Each operation is a short sequence of link resolution, transport calls and polling.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional

from ..domain.errors import NonexistentComponent, OperationFailed, OperationTimeout
from ..domain.interfaces.transport import Transport
from ..domain.models.link import LinkRecord, as_descriptor
from ..domain.models.polling import POLL_TIMEOUT
from ..domain.services.poller import Poller
from ..domain.services.resolver import LinkResolver
from ..infrastructure.cache.link_cache import LinkCache
from ..infrastructure.config.settings import AppSettings, get_settings

# Project states while the backend is still provisioning
PROJECT_PENDING_STATES = {'PREPARING', 'PREPARED', 'LOADING'}
# Task states while an asynchronous task is still running
TASK_PENDING_STATES = {'RUNNING', 'WAIT', 'PREPARED', 'SCHEDULED'}
TASK_STATUS_KEYS = ('taskState', 'wTaskStatus', 'taskStatus')


class GoodDataClient:
    """Client for the GoodData REST API, navigating it through links."""

    def __init__(
        self,
        agent: Optional[Transport] = None,
        settings: Optional[AppSettings] = None,
        entry_point: Optional[str] = None,
        cache: Optional[LinkCache] = None,
        poller: Optional[Poller] = None,
        logger: Optional[logging.Logger] = None
    ):
        self._settings = settings or get_settings()
        self._logger = logger or logging.getLogger(__name__)
        if agent is None:
            from ..infrastructure.http.agent import GoodDataAgent
            agent = GoodDataAgent(self._settings.gooddata)
        self._agent = agent
        self._cache = cache if cache is not None else LinkCache(self._agent)
        self._resolver = LinkResolver(self._cache, entry_point or self._settings.gooddata.root)
        self._poller = poller or Poller(
            interval=self._settings.poll.interval_s,
            budget=self._settings.poll.budget,
        )

    @property
    def agent(self) -> Transport:
        return self._agent

    @property
    def cache(self) -> LinkCache:
        return self._cache

    @property
    def resolver(self) -> LinkResolver:
        return self._resolver

    # Navigation

    def links(self, *path: Any) -> List[LinkRecord]:
        """Traverse the resource hierarchy along ``path``, refreshing a stale cache once.

        ``path`` elements are descriptors or bare categories::

            client.links("md", {"category": "project"})
        """
        return self._resolver.links(*path)

    def get_links(self, *path: Any) -> List[LinkRecord]:
        """Traverse ``path`` without the stale cache recovery."""
        return self._resolver.get_links(*path)

    def get_uri(self, *path: Any) -> Optional[str]:
        """URI of the first resource ``links`` finds, or None."""
        return self._resolver.get_uri(*path)

    def invalidate_links(self) -> None:
        """Forget everything learned about the API structure."""
        self._cache.invalidate_all()

    # Actions

    def login(self, username: str, password: str) -> Any:
        """Obtain a session token; the agent keeps it in its cookie jar."""
        self._logger.info(f"Logging in as {username}")
        return self._agent.post(self._require_uri('login'), {
            'postUserLogin': {
                'login': username,
                'password': password,
                'remember': 0,
            }
        })

    def projects(self) -> List[LinkRecord]:
        """Links to project resources on the metadata server."""
        return self.get_links('md', 'project')

    def create_project(
        self,
        title: str,
        summary: str = '',
        template: Optional[str] = None,
        token: Optional[str] = None,
        wait: bool = True,
    ) -> str:
        """Create a project and return its URI, by default once it is enabled."""
        meta: Dict[str, Any] = {'title': title, 'summary': summary}
        if template:
            meta['projectTemplate'] = template
        content: Dict[str, Any] = {'guidedNavigation': 1}
        if token:
            content['authorizationToken'] = token

        response = self._agent.post(self._require_uri('projects'), {
            'project': {'meta': meta, 'content': content}
        })
        uri = response['uri']
        self._logger.info(f"Created project {title!r} at {uri}")
        if not wait:
            return uri

        body = self._wait(uri, lambda b: _project_state(b) not in PROJECT_PENDING_STATES)
        state = _project_state(body)
        if state != 'ENABLED':
            raise OperationFailed(uri, state or 'UNKNOWN', body)
        # New project, so the hierarchy we know of is outdated
        self._cache.invalidate_all()
        return uri

    def delete_project(self, uri: str) -> bool:
        """Delete a project."""
        self._logger.info(f"Deleting project {uri}")
        deleted = self._agent.delete(uri)
        self._cache.invalidate_all()
        return deleted

    def wait_for_task(self, uri: str, budget: Optional[int] = None) -> Any:
        """Poll an asynchronous task until it finishes and return its final body."""
        body = self._wait(uri, lambda b: _task_status(b) not in TASK_PENDING_STATES, budget)
        status = _task_status(body)
        if status != 'OK':
            raise OperationFailed(uri, status or 'UNKNOWN', body)
        return body

    def _wait(
        self,
        uri: str,
        finished: Callable[[Any], bool],
        budget: Optional[int] = None,
    ) -> Any:
        body = self._poller.poll(lambda: self._agent.get(uri), finished, budget)
        if body is POLL_TIMEOUT:
            raise OperationTimeout(uri, self._poller.budget if budget is None else budget)
        return body

    def _require_uri(self, *path: Any) -> str:
        uri = self.get_uri(*path)
        if uri is None:
            raise NonexistentComponent(as_descriptor(path[-1]), self._resolver.entry_point)
        return uri


def _project_state(body: Any) -> Optional[str]:
    try:
        return body['project']['content']['state']
    except (KeyError, TypeError):
        return None


def _task_status(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    for key in TASK_STATUS_KEYS:
        section = body.get(key)
        if isinstance(section, dict) and 'status' in section:
            return section['status']
    return None
