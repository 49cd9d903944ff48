import pytest

from gooddata_client.domain.errors import TransportError


class FakeTransport:
    """In-memory transport serving canned bodies and recording every call."""

    def __init__(self, resources=None):
        self.resources = dict(resources or {})
        self.gets = []
        self.posts = []
        self.deletes = []
        self.post_responses = {}

    def get(self, uri):
        self.gets.append(uri)
        if uri not in self.resources:
            raise TransportError('404 Not Found', status=404, reason='Not Found', uri=uri)
        body = self.resources[uri]
        if callable(body):
            return body()
        return body

    def post(self, uri, body):
        self.posts.append((uri, body))
        return self.post_responses.get(uri, {})

    def delete(self, uri):
        self.deletes.append(uri)
        return True


@pytest.fixture
def transport():
    return FakeTransport({
        '/gdc': {'about': {'links': {
            'projects': '/gdc/projects',
            'md': '/gdc/md',
            'login': '/gdc/account/login',
        }}},
        '/gdc/md': {'about': {'links': [
            {'category': 'project', 'identifier': '41', 'title': 'Sales', 'link': '/gdc/md/41'},
            {'category': 'project', 'identifier': '42', 'title': 'Marketing', 'link': '/gdc/md/42'},
        ]}},
        '/gdc/md/42': {'about': {'links': [
            {'category': 'query', 'link': '/gdc/md/42/query'},
        ]}},
        '/gdc/md/42/query': {'query': {'entries': [
            {'category': 'reports', 'link': 'reports', 'title': 'Reports'},
            {'category': 'datasets', 'link': 'datasets', 'title': 'Datasets'},
        ]}},
    })
