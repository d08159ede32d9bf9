'''
Synchronize a directory of music files into a tag-based library layout
'''


LOSSLESS_EXTENSIONS = {'flac', 'wav', 'aiff', 'm4a'}


DEFAULT_CONFIG = {
    'config': 'main.toml',
    'encoders': 'encoders',
    'log_file': 'musicsync.log',
}
CONFIG_ENCODING = 'utf-8'

INPUT_PLACEHOLDER = '<inputfile>'
OUTPUT_PLACEHOLDER = '<outputfile>'
