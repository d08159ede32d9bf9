'''
Decide whether a music file should be transcoded or copied verbatim
'''


from enum import Enum

from musicsync.errors import ConfigError



class Decision(Enum):
    TRANSCODE = 'transcode'
    COPY = 'copy'



class ConversionPolicy(Enum):
    '''Global rule that selects the operation for each file'''

    ALL = 'all'
    NONE = 'none'
    IF_NOT_SAME = 'if-not-same'
    ONLY_LOSSLESS = 'only-lossless'


    @classmethod
    def parse(cls, text):
        '''
        Read policy from its configuration value.

        Letter case, dashes and underscores are ignored, so "IfNotSame",
        "if-not-same" and "convert-if-extension-differs" all mean the same.
        '''
        key = ''.join(c for c in str(text).lower() if c not in '-_ ')
        try:
            return _ALIASES[key]
        except KeyError:
            raise ConfigError('Unknown conversion policy: {!r} (expected one of: {})'.format(
                text,
                ', '.join(p.value for p in cls),
            )) from None



_ALIASES = {
    'all': ConversionPolicy.ALL,
    'convertall': ConversionPolicy.ALL,
    'none': ConversionPolicy.NONE,
    'convertnone': ConversionPolicy.NONE,
    'ifnotsame': ConversionPolicy.IF_NOT_SAME,
    'ifextensiondiffers': ConversionPolicy.IF_NOT_SAME,
    'convertifextensiondiffers': ConversionPolicy.IF_NOT_SAME,
    'onlylossless': ConversionPolicy.ONLY_LOSSLESS,
    'onlyiflossless': ConversionPolicy.ONLY_LOSSLESS,
    'convertonlyiflossless': ConversionPolicy.ONLY_LOSSLESS,
}



def decide(policy, audio_file, target_extension):
    '''Choose the operation for a single file under the given policy'''
    if policy is ConversionPolicy.ALL:
        transcode = True
    elif policy is ConversionPolicy.NONE:
        transcode = False
    elif policy is ConversionPolicy.IF_NOT_SAME:
        transcode = audio_file.extension != target_extension.lstrip('.').lower()
    elif policy is ConversionPolicy.ONLY_LOSSLESS:
        transcode = audio_file.is_lossless
    else:
        raise ValueError('Invalid conversion policy: {!r}'.format(policy))
    return Decision.TRANSCODE if transcode else Decision.COPY
