'''
Shared fixtures for musicsync tests
'''


import os
import struct
import sys
import textwrap

from musicsync.config import EncoderProfile


ENCODER_SCRIPTS = {
    'copy': '''
        import shutil, sys
        print('encoding', sys.argv[1])
        shutil.copyfile(sys.argv[1], sys.argv[2])
    ''',
    'fail': '''
        import sys
        sys.stderr.write('unsupported input\\n')
        sys.exit(3)
    ''',
    'hang': '''
        import time
        time.sleep(30)
    ''',
}



def write_file(path, content=b'music data'):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.write(content)
    return path



def make_profile(directory, behavior='copy', extension='ogg'):
    '''EncoderProfile that runs a small Python script as the encoder'''
    script = os.path.join(directory, 'encoder_{}.py'.format(behavior))
    with open(script, 'w') as f:
        f.write(textwrap.dedent(ENCODER_SCRIPTS[behavior]))
    return EncoderProfile(
        name = behavior,
        target_extension = extension,
        encoder = sys.executable,
        argument_template = (script, '<inputfile>', '<outputfile>'),
    )



def write_wave(path):
    '''Minimal RIFF/WAVE file: PCM format chunk and an empty data chunk'''
    fmt = struct.pack('<HHLLHH', 1, 1, 8000, 16000, 2, 16)
    body = b'WAVE' + b'fmt ' + struct.pack('<L', len(fmt)) + fmt + b'data' + struct.pack('<L', 0)
    return write_file(path, b'RIFF' + struct.pack('<L', len(body)) + body)



def write_aiff(path):
    '''Minimal AIFF file with a single COMM chunk'''
    comm = struct.pack('>hLh', 1, 0, 16) + b'\0' * 10  # zero sample rate
    body = b'AIFF' + b'COMM' + struct.pack('>L', len(comm)) + comm
    return write_file(path, b'FORM' + struct.pack('>L', len(body)) + body)



def write_flac(path):
    '''FLAC stream header with STREAMINFO only (44.1kHz, stereo, 16 bit)'''
    streaminfo = (
        struct.pack('>HH', 4096, 4096)
        + b'\0' * 6                                  # frame sizes
        + bytes([0x0A, 0xC4, 0x42, 0xF0, 0, 0, 0, 0])  # rate, channels, bps, samples
        + b'\0' * 16                                 # MD5
    )
    header = bytes([0x80, 0, 0, len(streaminfo)])  # last block, type 0
    return write_file(path, b'fLaC' + header + streaminfo)



def write_mp3(path, frames=10):
    '''MPEG-1 Layer III stream of silent 128 kbps 44.1kHz frames'''
    frame = b'\xff\xfb\x90\x00' + b'\0' * (417 - 4)
    return write_file(path, frame * frames)



def tag_id3(media, artist, title):
    '''Add raw ID3 frames to a mutagen WAVE/AIFF object'''
    from mutagen.id3 import TIT2, TPE1
    media.add_tags()
    media.tags.add(TPE1(encoding=3, text=[artist]))
    media.tags.add(TIT2(encoding=3, text=[title]))
    media.save()
