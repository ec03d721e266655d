import json

import pytest

from boolcompare.boolalg.config import ConfigError, Settings, load_settings


def test_defaults():
    settings = load_settings(env={})
    assert settings == Settings()
    assert settings.max_vars == 20
    assert settings.only_diff == False
    assert settings.markup == 'latex'


def test_environment():
    settings = load_settings(env={
        'BOOLCOMPARE_MAX_VARS': '8',
        'BOOLCOMPARE_ONLY_DIFF': 'yes',
        'BOOLCOMPARE_MARKUP': 'text'
    })
    assert settings == Settings(max_vars=8, only_diff=True, markup='text')


def test_file_then_environment(tmp_path):
    path = tmp_path / 'settings.json'
    path.write_text(json.dumps({'max_vars': 10, 'markup': 'python'}))
    assert load_settings(str(path), env={}) == Settings(max_vars=10, markup='python')
    assert load_settings(str(path), env={'BOOLCOMPARE_MAX_VARS': '4'}).max_vars == 4


@pytest.mark.parametrize('content', ['[1, 2]', '{"colour": "red"}', '{"max_vars": 0}', '{"max_vars": true}', '{"markup": "html"}', 'not json'])
def test_bad_file(tmp_path, content):
    path = tmp_path / 'settings.json'
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_settings(str(path), env={})


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(str(tmp_path / 'nope.json'), env={})


@pytest.mark.parametrize('env', [
    {'BOOLCOMPARE_MAX_VARS': 'many'},
    {'BOOLCOMPARE_MAX_VARS': '-1'},
    {'BOOLCOMPARE_ONLY_DIFF': 'maybe'},
    {'BOOLCOMPARE_MARKUP': 'svg'},
])
def test_bad_environment(env):
    with pytest.raises(ConfigError):
        load_settings(env=env)
