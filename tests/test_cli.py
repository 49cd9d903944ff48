import json

import pytest

from gooddata_client import cli
from gooddata_client.application.gooddata_service import GoodDataClient
from gooddata_client.infrastructure.config.settings import AppSettings
from gooddata_client.utils import parse_path, parse_path_element


def test_parse_path_elements():
    assert parse_path(['md', 'category=project,title=Sales', '/gdc/md']) == [
        'md',
        {'category': 'project', 'title': 'Sales'},
        '/gdc/md',
    ]
    assert parse_path_element('https://h.example.com/gdc?x=1') == 'https://h.example.com/gdc?x=1'


def test_parse_path_rejects_bad_pairs():
    with pytest.raises(ValueError):
        parse_path_element('category=project,oops')


def test_links_command_prints_json(transport, capsys, monkeypatch):
    monkeypatch.delenv('GOODDATA_USERNAME', raising=False)
    monkeypatch.delenv('GOODDATA_PASSWORD', raising=False)
    monkeypatch.setattr(cli, 'get_settings', lambda: AppSettings(_env_file=None))
    client = GoodDataClient(agent=transport, settings=AppSettings(), entry_point='/gdc')
    args = cli.build_parser().parse_args(['links', 'md', 'identifier=42'])

    assert cli.run(args, client) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == [{'category': 'project', 'identifier': '42', 'title': 'Marketing', 'link': '/gdc/md/42'}]
    assert transport.posts == []


def test_uri_command_logs_in_first(transport, capsys):
    client = GoodDataClient(agent=transport, settings=AppSettings(), entry_point='/gdc')
    args = cli.build_parser().parse_args(['--username', 'me', '--password', 'pw', 'uri', 'projects'])

    assert cli.run(args, client) == 0

    assert json.loads(capsys.readouterr().out) == '/gdc/projects'
    assert transport.posts[0][0] == '/gdc/account/login'


def test_main_reports_errors(monkeypatch, capsys):
    class _Broken:
        def __init__(self, *args, **kwargs):
            pass

        def links(self, *path):
            from gooddata_client.domain.errors import NonexistentComponent
            raise NonexistentComponent({'category': 'md'}, '/gdc')

    monkeypatch.setattr(cli, 'GoodDataClient', _Broken)
    monkeypatch.setattr(cli, 'setup_logging', lambda *a, **k: None)
    monkeypatch.setattr(cli, 'get_settings', lambda: AppSettings(_env_file=None))
    monkeypatch.delenv('GOODDATA_USERNAME', raising=False)
    monkeypatch.delenv('GOODDATA_PASSWORD', raising=False)

    assert cli.main(['links', 'md']) == 1
    assert 'No link matching' in capsys.readouterr().err


def test_main_reports_invalid_settings(monkeypatch, capsys):
    from gooddata_client.infrastructure.config import settings as settings_module

    monkeypatch.setattr(settings_module, '_settings', None)
    monkeypatch.setattr(cli, 'setup_logging', lambda *a, **k: None)
    monkeypatch.setenv('GOODDATA_ROOT', '/gdc')

    assert cli.main(['links']) == 2
    assert 'absolute URI' in capsys.readouterr().err


def test_main_resolves_relative_root_against_configured_root(monkeypatch):
    seen = {}

    class _Recorder:
        def __init__(self, settings=None, entry_point=None):
            seen['entry_point'] = entry_point

        def links(self, *path):
            return []

    monkeypatch.setattr(cli, 'GoodDataClient', _Recorder)
    monkeypatch.setattr(cli, 'setup_logging', lambda *a, **k: None)
    monkeypatch.setattr(cli, 'get_settings', lambda: AppSettings(_env_file=None))
    monkeypatch.delenv('GOODDATA_ROOT', raising=False)
    monkeypatch.delenv('GOODDATA_USERNAME', raising=False)
    monkeypatch.delenv('GOODDATA_PASSWORD', raising=False)

    assert cli.main(['--root', '/gdc/md', 'links']) == 0
    assert seen['entry_point'] == 'https://secure.gooddata.com/gdc/md'
