'''
Workers that put a single music file into the library
'''


import subprocess
from shutil import copyfile

from musicsync.errors import CopyError, EncodeError
from musicsync.util import make_target_directory


import logging
log = logging.getLogger(__name__)



STDERR_TAIL = 20  # lines of encoder output to keep in error messages



class VerbatimFileCopy:
    '''
    Worker that does no transcoding but instead just copies the source file.

    Destination keeps the extension of the source.
    '''

    def __init__(self, logger=None):
        self.log = logger or log


    def __call__(self, audio_file):
        output_filename = audio_file.with_extension(audio_file.extension)
        print('Copying {} -> {}'.format(audio_file.source_path, output_filename))
        try:
            make_target_directory(output_filename)
            copyfile(audio_file.source_path, output_filename)
        except OSError as e:
            raise CopyError('Cannot copy {} -> {}: {}'.format(
                audio_file.source_path,
                output_filename,
                e,
            )) from e
        audio_file.converted = False
        self.log.info('Copied {} -> {}'.format(audio_file.source_path, output_filename))
        return output_filename


    def __repr__(self):
        return '<{cls}()>'.format(
            cls = self.__class__.__name__,
        )



class ExternalEncoder:
    '''
    Worker that transcodes music files by calling an external encoder
    executable described by EncoderProfile.

    Exit status of the encoder is the only indication of success, its standard
    output is logged but never inspected.
    '''

    def __init__(self, profile, timeout=None, logger=None):
        self.profile = profile
        self.timeout = timeout
        self.log = logger or log


    @property
    def extension(self):
        return self.profile.target_extension


    def __call__(self, audio_file):
        output_filename = audio_file.with_extension(self.extension)
        command = self.profile.command(audio_file.source_path, output_filename)
        print('Converting {} -> {}'.format(audio_file.source_path, output_filename))
        self.log.debug('Executing: {}'.format(command))

        try:
            make_target_directory(output_filename)
        except OSError as e:
            raise EncodeError('Cannot create directory for {}: {}'.format(output_filename, e)) from e

        try:
            process = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise EncodeError(
                'Encoder timed out after {}s on {}'.format(self.timeout, audio_file.source_path),
                stderr=decode(e.stderr),
            ) from e
        except OSError as e:
            raise EncodeError('Cannot start encoder {!r}: {}'.format(self.profile.encoder, e)) from e

        stdout, stderr = decode(process.stdout), decode(process.stderr)
        if stdout:
            self.log.debug('Stdout of {} for {}:\n{}'.format(
                self.profile.encoder,
                audio_file.source_path,
                stdout,
            ))
        if process.returncode != 0:
            raise EncodeError(
                'Encoder {!r} exited with status {} on {}{}'.format(
                    self.profile.encoder,
                    process.returncode,
                    audio_file.source_path,
                    ':\n' + tail(stderr) if stderr.strip() else '',
                ),
                returncode=process.returncode,
                stderr=stderr,
            )

        audio_file.converted = True
        self.log.info('Converted {} -> {}'.format(audio_file.source_path, output_filename))
        return output_filename


    def __repr__(self):
        return '<{cls}({profile!r}, timeout={timeout!r})>'.format(
            cls = self.__class__.__name__,
            profile = self.profile.name,
            timeout = self.timeout,
        )



def decode(output):
    if not output:
        return ''
    return output.decode('utf-8', errors='replace')



def tail(text, lines=STDERR_TAIL):
    return '\n'.join(text.strip().splitlines()[-lines:])
