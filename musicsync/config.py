'''
Load main configuration and encoder profiles from TOML files
'''


import json
import os
import tomllib
from collections import namedtuple
from importlib.resources import files

import jsonschema

from musicsync import (
    CONFIG_ENCODING,
    INPUT_PLACEHOLDER,
    OUTPUT_PLACEHOLDER,
)
from musicsync.errors import ConfigError
from musicsync.policy import ConversionPolicy


import logging
log = logging.getLogger(__name__)



Config = namedtuple('Config', [
    'storage_path',
    'music_files_template',
    'conversion_format',
    'convert',
])



class EncoderProfile(namedtuple('EncoderProfile', [
    'name',
    'target_extension',
    'encoder',
    'argument_template',
])):
    '''Parameters of the external encoder for one target format'''
    __slots__ = ()


    def arguments(self, input_filename, output_filename):
        '''Encoder command line with placeholders replaced by actual paths'''
        substitutions = {
            INPUT_PLACEHOLDER: input_filename,
            OUTPUT_PLACEHOLDER: output_filename,
        }
        return [substitutions.get(token, token) for token in self.argument_template]


    def command(self, input_filename, output_filename):
        return [self.encoder] + self.arguments(input_filename, output_filename)



def load_toml(path):
    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise ConfigError('Can not read config file {}: {}'.format(path, e)) from e
    try:
        return tomllib.loads(raw.decode(CONFIG_ENCODING))
    except UnicodeDecodeError as e:
        raise ConfigError('Config is not valid {}: {}'.format(CONFIG_ENCODING, path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError('TOML parse error in {}: {}'.format(path, e)) from e



_schemas = {}
def validate(data, schema_name, path=None):
    '''Check parsed config against one of the JSON schemas shipped with the package'''
    try:
        schema = _schemas[schema_name]
    except KeyError:
        resource = files(__package__).joinpath('{}.schema.json'.format(schema_name))
        schema = _schemas[schema_name] = json.loads(resource.read_text(encoding='utf-8'))
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = '.'.join(str(p) for p in e.absolute_path) or '<root>'
        raise ConfigError('Invalid {} ({}): {}'.format(
            path or schema_name,
            location,
            e.message,
        )) from e



def load_config(path):
    '''Read main configuration file'''
    data = load_toml(path)
    validate(data, 'config', path)
    config = Config(
        storage_path = os.path.abspath(os.path.expanduser(data['storage_path'])),
        music_files_template = data['music_files_template'],
        conversion_format = data['conversion_format'],
        convert = ConversionPolicy.parse(data['convert']),
    )
    log.debug('Loaded {!r} from {}'.format(config, path))
    return config



def load_encoder_profile(directory, name):
    '''Read <name>.toml from the directory with encoder profiles'''
    path = os.path.join(directory, '{}.toml'.format(name))
    data = load_toml(path)
    validate(data, 'encoder', path)
    profile = EncoderProfile(
        name = name,
        target_extension = data['extension'].lstrip('.').lower(),
        encoder = data['encoder'],
        argument_template = tuple(data['command_line'].split()),
    )
    log.debug('Loaded {!r} from {}'.format(profile, path))
    return profile
