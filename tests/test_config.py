'''
Unit tests for loading TOML configuration
'''


import os
from tempfile import TemporaryDirectory
from unittest import TestCase

from musicsync.config import load_config, load_encoder_profile
from musicsync.errors import ConfigError
from musicsync.policy import ConversionPolicy


MAIN_CONFIG = '''
storage_path = "/srv/music"
music_files_template = "<artist>/<album>/<title>"
conversion_format = "vorbis"
convert = "OnlyLossless"
'''

ENCODER_CONFIG = '''
extension = "ogg"
encoder = "ffmpeg"
command_line = "-y -i <inputfile>  -c:a libvorbis <outputfile>"
'''



class ConfigFiles(TestCase):
    def setUp(self):
        self.tempdir = TemporaryDirectory()
        self.root = self.tempdir.name


    def tearDown(self):
        self.tempdir.cleanup()


    def write(self, name, content):
        path = os.path.join(self.root, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path


    def test_main_config(self):
        config = load_config(self.write('main.toml', MAIN_CONFIG))
        self.assertEqual(config.storage_path, os.path.abspath('/srv/music'))
        self.assertEqual(config.music_files_template, '<artist>/<album>/<title>')
        self.assertEqual(config.conversion_format, 'vorbis')
        self.assertIs(config.convert, ConversionPolicy.ONLY_LOSSLESS)


    def test_encoder_profile(self):
        self.write('vorbis.toml', ENCODER_CONFIG)
        profile = load_encoder_profile(self.root, 'vorbis')
        self.assertEqual(profile.target_extension, 'ogg')
        self.assertEqual(profile.encoder, 'ffmpeg')
        self.assertEqual(
            profile.command('/in/a b.flac', '/out/c.ogg'),
            ['ffmpeg', '-y', '-i', '/in/a b.flac', '-c:a', 'libvorbis', '/out/c.ogg'],
        )


    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(os.path.join(self.root, 'nothing.toml'))
        with self.assertRaises(ConfigError):
            load_encoder_profile(self.root, 'nothing')


    def test_invalid_toml(self):
        with self.assertRaises(ConfigError):
            load_config(self.write('main.toml', 'storage_path = '))


    def test_missing_key(self):
        content = MAIN_CONFIG.replace('conversion_format = "vorbis"', '')
        with self.assertRaises(ConfigError) as context:
            load_config(self.write('main.toml', content))
        self.assertIn('conversion_format', str(context.exception))


    def test_wrong_type(self):
        content = MAIN_CONFIG.replace('"/srv/music"', '42')
        with self.assertRaises(ConfigError):
            load_config(self.write('main.toml', content))


    def test_unknown_policy(self):
        content = MAIN_CONFIG.replace('OnlyLossless', 'Sometimes')
        with self.assertRaises(ConfigError):
            load_config(self.write('main.toml', content))


    def test_placeholders_required(self):
        content = ENCODER_CONFIG.replace('<outputfile>', 'out.ogg')
        self.write('vorbis.toml', content)
        with self.assertRaises(ConfigError):
            load_encoder_profile(self.root, 'vorbis')
