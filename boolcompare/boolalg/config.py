# comparison settings
#
# sources, later ones win:
#   defaults below
#   optional JSON object file, eg: {"max_vars": 12, "markup": "text"}
#   environment BOOLCOMPARE_MAX_VARS, BOOLCOMPARE_ONLY_DIFF, BOOLCOMPARE_MARKUP

import dataclasses
import json
import os

MARKUPS = ('latex', 'text', 'python')

ENV_MAX_VARS = 'BOOLCOMPARE_MAX_VARS'
ENV_ONLY_DIFF = 'BOOLCOMPARE_ONLY_DIFF'
ENV_MARKUP = 'BOOLCOMPARE_MARKUP'

class ConfigError(ValueError):
    pass

@dataclasses.dataclass(frozen=True)
class Settings:
    # 2^20 rows is the largest table we are willing to materialize
    max_vars: int = 20
    only_diff: bool = False
    markup: str = 'latex'

    def validated(self):
        if type(self.max_vars) != int or self.max_vars < 1:
            raise ConfigError(f'max_vars must be a positive integer, got {self.max_vars!r}')
        if type(self.only_diff) != bool:
            raise ConfigError(f'only_diff must be a boolean, got {self.only_diff!r}')
        if self.markup not in MARKUPS:
            raise ConfigError(f'markup must be one of {", ".join(MARKUPS)}, got {self.markup!r}')
        return self

def parse_bool(name, raw):
    match raw.strip().lower():
        case '1' | 'true' | 'yes' | 'on':
            return True
        case '0' | 'false' | 'no' | 'off' | '':
            return False
        case _:
            raise ConfigError(f'{name} must be a boolean, got {raw!r}')

def parse_int(name, raw):
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{name} must be an integer, got {raw!r}')

def load_settings(config_path=None, env=None):
    values = {}

    if config_path:
        try:
            with open(config_path) as fp:
                config = json.load(fp)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f'invalid config file {config_path}: {e}')
        if type(config) != dict:
            raise ConfigError('config file must hold a JSON object')
        unknown = sorted(set(config) - {f.name for f in dataclasses.fields(Settings)})
        if unknown:
            raise ConfigError(f'unknown config keys: {", ".join(unknown)}')
        values.update(config)

    if env == None:
        env = os.environ
    if env.get(ENV_MAX_VARS):
        values['max_vars'] = parse_int(ENV_MAX_VARS, env[ENV_MAX_VARS])
    if ENV_ONLY_DIFF in env:
        values['only_diff'] = parse_bool(ENV_ONLY_DIFF, env[ENV_ONLY_DIFF])
    if env.get(ENV_MARKUP):
        values['markup'] = env[ENV_MARKUP].strip()

    return Settings(**values).validated()
