'''
Music files and their place in the target library
'''


import os

import mutagen
from mutagen.easyid3 import EasyID3
from mutagen.id3 import ID3

from musicsync import LOSSLESS_EXTENSIONS
from musicsync.errors import MetadataError, NoMetadata, UnknownExtension
from musicsync.util import add_extension, find_files, value


import logging
log = logging.getLogger(__name__)



def file_extension(filename):
    '''Lowercase extension of the file (without the dot)'''
    extension = os.path.splitext(filename)[1][1:].lower()
    if not extension:
        raise UnknownExtension('File has no extension: {}'.format(filename))
    return extension



def is_lossless(filename):
    '''Check if file extension denotes a lossless format'''
    return file_extension(filename) in LOSSLESS_EXTENSIONS



def read_tags(filename):
    '''
    Read music tags from file headers.

    Raise NoMetadata if file contains no tags at all.
    '''
    try:
        media = mutagen.File(filename, easy=True)
    except (mutagen.MutagenError, OSError) as e:
        raise MetadataError('Can not read metadata from {}: {}'.format(filename, e)) from e
    if media is None:
        raise NoMetadata('Not a supported music file: {}'.format(filename))
    tags = media.tags
    if isinstance(tags, ID3):  # WAVE and AIFF have no easy mode
        tags = easy_id3(tags) or tags
    if not tags or not list(tags.keys()):
        raise NoMetadata('File contains zero metadata fields: {}'.format(filename))
    return tags



def easy_id3(id3):
    '''Map raw ID3 frames to the same keys EasyID3 uses for MP3 files'''
    tags = {}
    for key, getter in EasyID3.Get.items():
        try:
            values = getter(id3, key)
        except KeyError:  # frame is absent
            continue
        if values:
            tags[key] = values
    return tags



def render_template(template, tags):
    '''
    Substitute <key> placeholders in the template with tag values.

    Placeholders with no matching tag are left untouched.
    '''
    for key in tags.keys():
        placeholder = '<{}>'.format(key.lower())
        if placeholder in template:
            template = template.replace(placeholder, value(tags[key]))
    return template



def resolve_destination(filename, template, storage_path):
    '''Calculate location of the music file within the library'''
    return os.path.join(storage_path, render_template(template, read_tags(filename)))



class AudioFile:
    '''Single music file scheduled for synchronization'''


    def __init__(self, source_path, destination_base, lossless=None):
        self._source_path = os.path.abspath(source_path)
        self.destination_base = destination_base
        self.destination_path = destination_base
        if lossless is None:
            lossless = is_lossless(self._source_path)
        self.is_lossless = lossless
        self.converted = None  # True/False once the file was transcoded/copied


    @classmethod
    def from_config(cls, source_path, config):
        '''Read metadata and place the file according to the config'''
        destination = resolve_destination(
            source_path,
            config.music_files_template,
            config.storage_path,
        )
        return cls(source_path, destination)


    def __repr__(self):
        return '{cls}({source!r})'.format(
            cls = self.__class__.__name__,
            source = self.source_path,
        )


    @property
    def source_path(self):
        return self._source_path


    @property
    def extension(self):
        return file_extension(self._source_path)


    def target(self, extension):
        '''Destination path with the given extension'''
        return add_extension(self.destination_base, extension)


    def with_extension(self, extension):
        '''Fix the extension of destination path'''
        self.destination_path = self.target(extension)
        return self.destination_path


    def size(self):
        return os.path.getsize(self._source_path)



class Library:
    '''Music files found in the input directory'''


    def __init__(self, directory, config):
        self.directory = directory
        self.config = config
        self.files = []
        self.skipped = []
        log.debug('Initialized {}'.format(self))


    def __repr__(self):
        return '{cls}({directory!r})'.format(
            cls = self.__class__.__name__,
            directory = self.directory,
        )


    def __iter__(self):
        return iter(self.files)


    def __len__(self):
        return len(self.files)


    def scan(self):
        '''Create AudioFile objects for every file in the directory'''
        for filename in find_files(self.directory):
            try:
                audio_file = AudioFile.from_config(filename, self.config)
            except MetadataError as e:
                log.debug('Skipped {}: {}'.format(filename, e))
                self.skipped.append(filename)
                continue
            self.files.append(audio_file)
        log.info('Found {} music files in {} ({} skipped)'.format(
            len(self.files),
            self.directory,
            len(self.skipped),
        ))
        return self
