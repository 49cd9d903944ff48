from urllib.parse import urljoin

import pytest

from gooddata_client.domain.errors import AmbiguousPath, NonexistentComponent
from gooddata_client.domain.models.link import LinkRecord
from gooddata_client.domain.services.resolver import LinkResolver
from gooddata_client.infrastructure.cache.link_cache import LinkCache

from conftest import FakeTransport


def _resolver(transport, entry_point='/gdc'):
    return LinkResolver(LinkCache(transport), entry_point)


def test_descriptive_root_category(transport):
    resolver = _resolver(transport)
    assert resolver.get_uri('projects') == '/gdc/projects'


def test_aggregate_record_carries_meta():
    transport = FakeTransport({
        '/gdc/projects/1': {'project': {'links': {'self': '/gdc/projects/1'}, 'meta': {'title': 'X'}}},
    })
    resolver = _resolver(transport)

    found = resolver.links('/gdc/projects/1', {'category': 'project'})

    assert len(found) == 1
    assert found[0]['title'] == 'X'
    assert found[0].link == '/gdc/projects/1'


def test_intermediate_ambiguity_and_disambiguation(transport):
    resolver = _resolver(transport)

    with pytest.raises(AmbiguousPath) as excinfo:
        resolver.get_links('md', {'category': 'project'}, 'query')
    assert len(excinfo.value.candidates) == 2
    assert excinfo.value.root == '/gdc/md'

    found = resolver.get_links('md', {'category': 'project', 'identifier': '42'}, 'query')
    assert [r.link for r in found] == ['/gdc/md/42/query']


def test_terminal_descriptor_may_match_many(transport):
    resolver = _resolver(transport)
    found = resolver.get_links('md', {'category': 'project'})
    assert [r['title'] for r in found] == ['Sales', 'Marketing']


def test_intermediate_without_match_raises(transport):
    resolver = _resolver(transport)
    with pytest.raises(NonexistentComponent) as excinfo:
        resolver.get_links('nothing-here', 'query')
    assert excinfo.value.descriptor == {'category': 'nothing-here'}
    assert excinfo.value.root == '/gdc'


def test_terminal_without_match_is_empty(transport):
    resolver = _resolver(transport)
    assert resolver.get_links('md', {'category': 'project', 'identifier': '99'}) == []


def test_relative_links_join_with_their_root(transport):
    resolver = _resolver(transport)
    found = resolver.get_links('md', {'identifier': 42}, 'query', 'reports')
    assert found[0].link == urljoin('/gdc/md/42/query', 'reports')


def test_same_path_twice_is_idempotent(transport):
    resolver = _resolver(transport)
    path = ('md', {'identifier': '42'}, 'query', 'datasets')

    first = resolver.links(*path)
    second = resolver.links(*path)

    assert first == second
    assert transport.gets == ['/gdc', '/gdc/md', '/gdc/md/42', '/gdc/md/42/query']


def test_path_may_start_from_explicit_root(transport):
    resolver = _resolver(transport, entry_point='/gdc/md')
    assert resolver.get_uri('/gdc/md/42', 'query') == '/gdc/md/42/query'
    assert transport.gets == ['/gdc/md/42']


def test_relative_root_joins_entry_point_and_shares_cache():
    root = 'https://secure.example.com/gdc'
    transport = FakeTransport({
        root: {'about': {'links': {'md': '/gdc/md'}}},
        root + '/md': {'about': {'links': [{'category': 'project', 'link': '/gdc/md/41'}]}},
    })
    resolver = _resolver(transport, entry_point=root)

    via_category = resolver.get_uri('md', 'project')
    via_root = resolver.get_uri('/gdc/md', 'project')

    assert via_category == via_root == 'https://secure.example.com/gdc/md/41'
    assert transport.gets == [root, root + '/md']


def test_stale_cache_is_refreshed_once():
    bodies = iter([
        {'about': {'links': {'md': '/gdc/md'}}},
        {'about': {'links': {'md': '/gdc/md', 'reports': '/gdc/reports'}}},
    ])
    transport = FakeTransport({'/gdc': lambda: next(bodies)})
    resolver = _resolver(transport)
    resolver.get_links('md')

    found = resolver.links('reports')

    assert [r.link for r in found] == ['/gdc/reports']
    assert transport.gets == ['/gdc', '/gdc']


def test_refresh_gives_up_after_one_retry():
    transport = FakeTransport({'/gdc': {'about': {'links': {'md': '/gdc/md'}}}})
    cache = LinkCache(transport)
    invalidations = []
    original = cache.invalidate_all

    def counting_invalidate():
        invalidations.append(True)
        original()

    cache.invalidate_all = counting_invalidate
    resolver = LinkResolver(cache, '/gdc')

    assert resolver.links('reports') == []
    assert resolver.get_uri('reports') is None
    assert len(invalidations) == 2
    assert transport.gets == ['/gdc', '/gdc', '/gdc']


def test_cached_records_resolve_against_injected_cache():
    cache = LinkCache(FakeTransport())
    cache.store('/gdc', [
        LinkRecord(link='/gdc/projects/1', attributes={'category': 'project', 'identifier': '41'}),
        LinkRecord(link='/gdc/projects/2', attributes={'category': 'project', 'identifier': '42'}),
    ])
    cache.store('/gdc/projects/2', [LinkRecord(link='/gdc/projects/2/roles', attributes={'category': 'roles'})])
    resolver = LinkResolver(cache, '/gdc')

    with pytest.raises(AmbiguousPath):
        resolver.get_links('project', 'roles')
    assert resolver.get_uri({'category': 'project', 'identifier': '42'}, 'roles') == '/gdc/projects/2/roles'
