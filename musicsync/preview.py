'''
Show what the sync action would do without touching the library
'''


import sys
from collections import namedtuple

from musicsync.policy import ConversionPolicy
from musicsync.util import size_megabytes



PreviewReport = namedtuple('PreviewReport', ['count', 'size'])



def preview(audio_files, policy, profile, stream=None):
    '''
    Print planned source -> destination mappings.

    Total size (in whole MB) is only calculated when files are going to be
    copied as is, since sizes of transcoded files are unknown in advance.
    '''
    if stream is None:
        stream = sys.stdout
    size = 0
    count = 0
    for audio_file in audio_files:
        print('{} -> {}'.format(
            audio_file.source_path,
            audio_file.target(profile.target_extension),
        ), file=stream)
        if policy is ConversionPolicy.NONE:
            size += size_megabytes(audio_file.source_path)
        count += 1
    print('{} file(s) will be transferred, with a total size of {} MB'.format(count, size),
          file=stream)
    return PreviewReport(count, size)
